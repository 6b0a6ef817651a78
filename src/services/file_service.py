"""
File Service for upload validation.
Checks that uploaded invoices are PDF files within the size limit.
"""
from dataclasses import dataclass
from typing import List
from src.core import config
from src.core.exceptions import ValidationException

PDF_CONTENT_TYPE = "application/pdf"


@dataclass
class UploadedFile:
    """An uploaded file as read from the multipart request."""
    filename: str
    content_type: str
    content: bytes
    
    @property
    def size(self) -> int:
        return len(self.content)


class FileService:
    """Service for file validation operations."""
    
    def validate_upload(self, file: UploadedFile) -> None:
        """
        Validate a single uploaded file.
        
        Raises:
            ValidationException: If the file is not a PDF or is too large
        """
        if file.content_type != PDF_CONTENT_TYPE:
            raise ValidationException("Only PDF files are allowed")
        
        if file.size > config.settings.max_file_size_bytes:
            raise ValidationException(
                f"File size too large. Maximum size is {config.settings.max_file_size_mb}MB."
            )
    
    def validate_uploads(self, files: List[UploadedFile]) -> None:
        """
        Validate a batch of uploads; one bad file rejects the whole batch.
        
        Raises:
            ValidationException: If no files were given or any file is invalid
        """
        if not files:
            raise ValidationException("No files uploaded")
        
        for file in files:
            self.validate_upload(file)
