from pathlib import Path

from pydantic import BaseModel, Field


class FileData(BaseModel):
    """Metadata about a loaded input file."""
    file_name: str = Field(..., description="The file's base name.")
    file_size: int = Field(..., ge=0, description="Size in bytes.")
    file_path: Path = Field(..., description="The path the file was loaded from.")
    line_count: int = Field(..., ge=0, description="Number of lines in the file.")

    @property
    def extension(self) -> str:
        """Lower-cased extension without the dot, or '' if the name has none."""
        _, dot, ext = self.file_name.rpartition(".")
        return ext.lower() if dot else ""
