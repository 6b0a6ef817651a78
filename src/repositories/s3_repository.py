"""
S3 Repository for file storage operations.
Handles invoice PDF uploads to Amazon S3.
"""
import io
import logging
from datetime import datetime, timezone
import boto3
from botocore.exceptions import ClientError
from src.core import config
from src.core.exceptions import StorageException
from src.repositories.file_storage import FileStorage

logger = logging.getLogger(__name__)


class S3Repository(FileStorage):
    """Repository for S3 file operations."""
    
    def __init__(self):
        self.s3_client = boto3.client('s3', region_name=config.settings.aws_region)
        self.bucket_name = config.settings.s3_bucket_name
    
    def save(self, content: bytes, filename: str) -> str:
        """
        Upload a file to S3.
        
        Args:
            content: File bytes to upload
            filename: Original filename
            
        Returns:
            str: S3 location of the stored object
            
        Raises:
            StorageException: If upload fails
        """
        try:
            s3_key = self._generate_s3_key(filename)
            
            self.s3_client.upload_fileobj(
                io.BytesIO(content),
                self.bucket_name,
                s3_key,
                ExtraArgs={'ContentType': 'application/pdf'}
            )
            
            s3_location = f"s3://{self.bucket_name}/{s3_key}"
            logger.debug("Uploaded %d bytes to %s", len(content), s3_location)
            return s3_location
            
        except ClientError as e:
            raise StorageException(f"Failed to upload file to S3: {str(e)}") from e
        except Exception as e:
            raise StorageException(f"Unexpected error during S3 upload: {str(e)}") from e
    
    def _generate_s3_key(self, filename: str) -> str:
        """
        Generate unique S3 key for file.
        
        Format: invoices/YYYY/MM/DD/{uuid}-{filename}
        """
        now = datetime.now(timezone.utc)
        return f"invoices/{now.year}/{now.month:02d}/{now.day:02d}/{self.unique_name(filename)}"
