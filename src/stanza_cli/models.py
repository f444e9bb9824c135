from typing import List, Optional
from pydantic import BaseModel, Field

class FormatterSettings(BaseModel):
    indent_size: int = Field(2, ge=1, le=16)
    line_length: int = Field(80, ge=20, le=400)
    use_tabs: bool = False
    enforce_blank_lines: bool = True

class FileReport(BaseModel):
    file_path: str
    status: str  # 'unchanged', 'reformatted', 'would-reformat', 'error'
    errors: List[str] = Field(default_factory=list)
    diff: Optional[str] = None

class FormatReport(BaseModel):
    files: List[FileReport]
    total_files: int
    changed_files: int
    error_files: int
    check: bool = False
