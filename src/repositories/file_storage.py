"""
Abstract base class for uploaded file storage.
"""
import uuid
from abc import ABC, abstractmethod


class FileStorage(ABC):
    """Persists uploaded file bytes and returns a location handle."""
    
    @abstractmethod
    def save(self, content: bytes, filename: str) -> str:
        """
        Store file content under a collision-free name.
        
        Returns:
            Path handle recorded on the invoice
        """
        pass
    
    @staticmethod
    def unique_name(filename: str) -> str:
        """Prefix the original filename with a uuid4."""
        return f"{uuid.uuid4()}-{filename}"
