"""Third-party integration skills (OAuth, object storage)"""

from skillforge.skills.backend.integrations.google_oauth import GoogleOAuthSkill
from skillforge.skills.backend.integrations.s3_upload import S3UploadSkill

__all__ = [
    "GoogleOAuthSkill",
    "S3UploadSkill",
]
