"""
S3Upload Skill

Generates an upload module backed by the AWS S3 client, usable against S3,
Cloudflare R2 (custom endpoint) or Supabase storage.
"""

from typing import Literal

from pydantic import Field

from skillforge.skills.base import BaseSkill, SkillParams, SkillResult
from skillforge.skills.templating import js_json


class S3UploadParams(SkillParams):
    provider: Literal["s3", "r2", "supabase"] = Field(default="s3")
    bucket_env_var: str = Field(default="S3_BUCKET")
    generate_presigned_urls: bool = Field(default=True)
    allowed_types: list[str] = Field(
        default_factory=lambda: ["image/jpeg", "image/png", "image/webp", "application/pdf"]
    )


UPLOAD_MODULE = """import { Module } from '@nestjs/common';
import { UploadService } from './upload.service';
import { UploadController } from './upload.controller';

@Module({
  providers: [UploadService],
  controllers: [UploadController],
  exports: [UploadService],
})
export class UploadModule {}
"""

PRESIGNED_METHODS = """
  async getPresignedUploadUrl(filename: string, contentType: string): Promise<{ uploadUrl: string; key: string }> {
    const ext = filename.split('.').pop();
    const key = `uploads/${uuid()}.${ext}`;

    const command = new PutObjectCommand({
      Bucket: this.bucket,
      Key: key,
      ContentType: contentType,
    });

    const uploadUrl = await getSignedUrl(this.s3, command, { expiresIn: 3600 });
    return { uploadUrl, key };
  }

  async getPresignedDownloadUrl(key: string): Promise<string> {
    const command = new GetObjectCommand({ Bucket: this.bucket, Key: key });
    return getSignedUrl(this.s3, command, { expiresIn: 3600 });
  }
"""

PRESIGNED_ROUTE = """
  @Get('presigned')
  async getPresigned(@Query('filename') filename: string, @Query('contentType') contentType: string) {
    return this.uploadService.getPresignedUploadUrl(filename, contentType);
  }
"""


def _service(params: S3UploadParams) -> str:
    endpoint = "\n      endpoint: process.env.R2_ENDPOINT," if params.provider == "r2" else ""
    presigned = PRESIGNED_METHODS if params.generate_presigned_urls else ""
    return f"""import {{ Injectable, BadRequestException }} from '@nestjs/common';
import {{ S3Client, PutObjectCommand, GetObjectCommand, DeleteObjectCommand }} from '@aws-sdk/client-s3';
import {{ getSignedUrl }} from '@aws-sdk/s3-request-presigner';
import {{ v4 as uuid }} from 'uuid';

@Injectable()
export class UploadService {{
  private s3: S3Client;
  private bucket = process.env.{params.bucket_env_var};
  private allowedTypes = {js_json(params.allowed_types)};

  constructor() {{
    this.s3 = new S3Client({{
      region: process.env.AWS_REGION || 'us-east-1',{endpoint}
      credentials: {{
        accessKeyId: process.env.AWS_ACCESS_KEY_ID || '',
        secretAccessKey: process.env.AWS_SECRET_ACCESS_KEY || '',
      }},
    }});
  }}

  async upload(file: Express.Multer.File, folder = 'uploads'): Promise<{{ url: string; key: string }}> {{
    if (!this.allowedTypes.includes(file.mimetype)) {{
      throw new BadRequestException(`File type ${{file.mimetype}} not allowed`);
    }}

    const ext = file.originalname.split('.').pop();
    const key = `${{folder}}/${{uuid()}}.${{ext}}`;

    await this.s3.send(new PutObjectCommand({{
      Bucket: this.bucket,
      Key: key,
      Body: file.buffer,
      ContentType: file.mimetype,
    }}));

    return {{
      url: `https://${{this.bucket}}.s3.amazonaws.com/${{key}}`,
      key,
    }};
  }}
{presigned}
  async delete(key: string): Promise<void> {{
    await this.s3.send(new DeleteObjectCommand({{ Bucket: this.bucket, Key: key }}));
  }}
}}
"""


def _controller(generate_presigned_urls: bool) -> str:
    presigned = PRESIGNED_ROUTE if generate_presigned_urls else ""
    return f"""import {{ Controller, Post, UploadedFile, UseInterceptors, Get, Query, Delete, Param }} from '@nestjs/common';
import {{ FileInterceptor }} from '@nestjs/platform-express';
import {{ UploadService }} from './upload.service';

@Controller('upload')
export class UploadController {{
  constructor(private uploadService: UploadService) {{}}

  @Post()
  @UseInterceptors(FileInterceptor('file'))
  async upload(@UploadedFile() file: Express.Multer.File) {{
    return this.uploadService.upload(file);
  }}
{presigned}
  @Delete(':key')
  async delete(@Param('key') key: string) {{
    await this.uploadService.delete(key);
    return {{ success: true }};
  }}
}}
"""


class S3UploadSkill(BaseSkill[S3UploadParams]):
    name = "s3_upload_manager"
    description = "Generates S3/R2/Supabase file upload service with presigned URLs."
    category = "backend.integrations"
    params_model = S3UploadParams

    async def handle(self, params: S3UploadParams) -> SkillResult:
        files = {
            "upload.module.ts": UPLOAD_MODULE,
            "upload.service.ts": _service(params),
            "upload.controller.ts": _controller(params.generate_presigned_urls),
        }
        return SkillResult.ok(
            files, {"provider": params.provider, "generated_files": list(files)}
        )
