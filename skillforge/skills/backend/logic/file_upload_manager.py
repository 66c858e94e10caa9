"""
FileUploadManager Skill

Generates a streaming Cloudinary upload service and its provider. The S3
option only yields a placeholder; ``s3_upload_manager`` covers S3 fully.
"""

from typing import Literal

from pydantic import Field

from skillforge.skills.base import BaseSkill, SkillParams, SkillResult


class FileUploadManagerParams(SkillParams):
    provider: Literal["cloudinary", "s3"] = Field(
        default="cloudinary", description="Storage provider"
    )
    folder_name: str = Field(default="uploads", description="Folder name in the cloud storage")
    # accepted for schema compatibility, not rendered
    allowed_mime_types: list[str] = Field(
        default_factory=lambda: ["image/jpeg", "image/png", "application/pdf"],
        description="Allowed file types",
    )


S3_PLACEHOLDER = "// AWS S3 implementation would go here using @aws-sdk/client-s3"

CLOUDINARY_PROVIDER = """
export const CloudinaryProvider = {
  provide: 'CLOUDINARY',
  useFactory: () => {
    return cloudinary.config({
      cloud_name: process.env.CLOUDINARY_NAME,
      api_key: process.env.CLOUDINARY_API_KEY,
      api_secret: process.env.CLOUDINARY_API_SECRET,
    });
  },
};"""

DEPENDENCIES = {
    "cloudinary": ["cloudinary", "streamifier", "@types/streamifier"],
    "s3": ["@aws-sdk/client-s3"],
}


def _cloudinary_service(folder_name: str) -> str:
    return f"""import {{ Injectable }} from '@nestjs/common';
import {{ v2 as cloudinary }} from 'cloudinary';
import {{ CloudinaryResponse }} from './cloudinary-response'; // Interface needed
import * as streamifier from 'streamifier';

@Injectable()
export class CloudinaryService {{
  uploadFile(file: Express.Multer.File): Promise<CloudinaryResponse> {{
    return new Promise<CloudinaryResponse>((resolve, reject) => {{
      const uploadStream = cloudinary.uploader.upload_stream(
        {{ folder: '{folder_name}' }},
        (error, result) => {{
          if (error) return reject(error);
          resolve(result);
        }},
      );
      streamifier.createReadStream(file.buffer).pipe(uploadStream);
    }});
  }}
}}
"""


class FileUploadManagerSkill(BaseSkill[FileUploadManagerParams]):
    name = "file_upload_manager"
    description = "Generates a file upload service for Cloudinary or S3."
    category = "backend.logic"
    params_model = FileUploadManagerParams

    async def handle(self, params: FileUploadManagerParams) -> SkillResult:
        if params.provider == "cloudinary":
            files = {
                "file-upload.service.ts": _cloudinary_service(params.folder_name),
                "provider.ts": CLOUDINARY_PROVIDER,
            }
        else:
            files = {"file-upload.service.ts": S3_PLACEHOLDER, "provider.ts": ""}

        return SkillResult.ok(
            files,
            {"provider": params.provider, "dependencies": DEPENDENCIES[params.provider]},
        )
