"""Tests for the backend infrastructure, integrations and logic skills."""

import pytest

from skillforge.skills.backend.infrastructure import (
    CacheManagerSkill,
    EmailServiceSkill,
    HealthCheckBuilderSkill,
    LoggerProviderSkill,
    WebSocketGatewaySkill,
)
from skillforge.skills.backend.integrations import GoogleOAuthSkill, S3UploadSkill
from skillforge.skills.backend.logic import (
    FileUploadManagerSkill,
    GeminiIntegrationSkill,
    MercadoPagoIntegrationSkill,
)
from skillforge.skills.backend.logic.file_upload_manager import S3_PLACEHOLDER


class TestCacheManager:
    def setup_method(self):
        self.skill = CacheManagerSkill()

    def test_ttl_alias_in_schema(self):
        assert "defaultTTL" in self.skill.parameters["properties"]

    @pytest.mark.asyncio
    async def test_all_files_by_default(self):
        result = await self.skill.execute({})

        assert list(result.data) == [
            "cache.module.ts",
            "cache.service.ts",
            "cacheable.decorator.ts",
            "cache.interceptor.ts",
            "cache.example.ts",
        ]
        assert result.metadata["default_ttl"] == 3600

    @pytest.mark.asyncio
    async def test_optional_files_are_skipped(self):
        result = await self.skill.execute(
            {"generateDecorator": False, "generateInterceptor": False, "defaultTTL": 10}
        )

        assert list(result.data) == ["cache.module.ts", "cache.service.ts", "cache.example.ts"]
        assert result.metadata["generated_files"] == list(result.data)


class TestEmailService:
    def setup_method(self):
        self.skill = EmailServiceSkill()

    @pytest.mark.asyncio
    async def test_nodemailer_with_handlebars_templates(self):
        result = await self.skill.execute({})

        assert "templates/welcome.hbs" in result.data
        assert "email.processor.ts" not in result.data
        assert "handlebars" in result.data["email.service.ts"]

    @pytest.mark.asyncio
    async def test_templates_need_handlebars(self):
        result = await self.skill.execute({"templateEngine": "ejs", "includeTemplates": True})

        assert not any(path.startswith("templates/") for path in result.data)

    @pytest.mark.asyncio
    async def test_queue_support_adds_processor(self):
        result = await self.skill.execute({"provider": "sendgrid", "queueSupport": True})

        assert "email.processor.ts" in result.data
        assert "BullModule" in result.data["email.module.ts"]
        assert result.metadata["queue_support"] is True


class TestHealthCheckBuilder:
    @pytest.mark.asyncio
    async def test_memory_threshold(self):
        result = await HealthCheckBuilderSkill().execute(
            {"checkDatabase": False, "memoryThresholdMB": 256}
        )

        assert "checkHeap('memory_heap', 256 * 1024 * 1024)" in result.data
        assert "TypeOrmHealthIndicator" not in result.data
        assert result.metadata["endpoint"] == "/health"


class TestLoggerProvider:
    @pytest.mark.asyncio
    async def test_library_choice(self):
        winston = await LoggerProviderSkill().execute({})
        pino = await LoggerProviderSkill().execute({"library": "pino"})

        assert winston.metadata["library"] == "winston"
        assert "winston" in winston.data
        assert "pino" in pino.data
        assert winston.metadata["recommended_dependencies"] != pino.metadata["recommended_dependencies"]


class TestWebSocketGateway:
    def setup_method(self):
        self.skill = WebSocketGatewaySkill()

    @pytest.mark.asyncio
    async def test_default_gateway(self):
        result = await self.skill.execute({})

        assert list(result.data) == [
            "events.gateway.ts",
            "ws-jwt.guard.ts",
            "events.module.ts",
            "use-socket.hook.ts",
        ]
        assert result.metadata["events"] == ["message", "join"]
        gateway = result.data["events.gateway.ts"]
        assert "@UseGuards(WsJwtGuard)" in gateway
        assert "this.server.to(room).emit('message'" in gateway
        assert "namespace = '/'" in result.data["use-socket.hook.ts"]

    @pytest.mark.asyncio
    async def test_without_auth_or_rooms(self):
        result = await self.skill.execute(
            {
                "gatewayName": "Chat",
                "namespace": "/chat",
                "withAuth": False,
                "withRooms": False,
                "events": [{"name": "typing", "hasPayload": False, "broadcast": True}],
            }
        )

        assert "ws-jwt.guard.ts" not in result.data
        gateway = result.data["chat.gateway.ts"]
        assert "namespace: '/chat'," in gateway
        assert "UseGuards" not in gateway
        assert "room:join" not in gateway
        assert "this.server.emit('typing', {\n      from: client.id,\n      timestamp" in gateway
        assert "namespace = '/chat'" in result.data["use-socket.hook.ts"]


class TestGoogleOAuth:
    @pytest.mark.asyncio
    async def test_generated_files(self):
        result = await GoogleOAuthSkill().execute({"callbackPath": "/oauth/google"})

        assert list(result.data) == [
            "google.strategy.ts",
            "google-auth.guard.ts",
            "auth.controller.ts",
            "auth.service.ts",
            "auth.module.ts",
        ]
        assert "/oauth/google" in result.data["google.strategy.ts"]
        assert result.metadata["callback_path"] == "/oauth/google"


class TestS3Upload:
    def setup_method(self):
        self.skill = S3UploadSkill()

    @pytest.mark.asyncio
    async def test_r2_endpoint(self):
        result = await self.skill.execute({"provider": "r2"})

        assert "endpoint: process.env.R2_ENDPOINT," in result.data["upload.service.ts"]

    @pytest.mark.asyncio
    async def test_presigned_urls_toggle(self):
        with_urls = await self.skill.execute({})
        without_urls = await self.skill.execute({"generatePresignedUrls": False})

        assert "getSignedUrl(" in with_urls.data["upload.service.ts"]
        assert "@Get('presigned')" in with_urls.data["upload.controller.ts"]
        assert "getSignedUrl(" not in without_urls.data["upload.service.ts"]
        assert "@Get('presigned')" not in without_urls.data["upload.controller.ts"]

    @pytest.mark.asyncio
    async def test_allowed_types_rendered(self):
        result = await self.skill.execute({"allowedTypes": ["image/gif"]})

        assert 'private allowedTypes = ["image/gif"];' in result.data["upload.service.ts"]


class TestFileUploadManager:
    @pytest.mark.asyncio
    async def test_cloudinary(self):
        result = await FileUploadManagerSkill().execute({"folderName": "avatars"})

        assert "avatars" in result.data["file-upload.service.ts"]
        assert result.data["provider.ts"]

    @pytest.mark.asyncio
    async def test_s3_placeholder(self):
        result = await FileUploadManagerSkill().execute({"provider": "s3"})

        assert result.data == {"file-upload.service.ts": S3_PLACEHOLDER, "provider.ts": ""}
        assert result.metadata["provider"] == "s3"


class TestGeminiIntegration:
    @pytest.mark.asyncio
    async def test_service_uses_env_var(self):
        result = await GeminiIntegrationSkill().execute(
            {"serviceName": "AiService", "apiKeyEnvVar": "GOOGLE_AI_KEY", "modelName": "gemini-1.5-pro"}
        )

        assert "export class AiService" in result.data
        assert "GOOGLE_AI_KEY" in result.data
        assert "gemini-1.5-pro" in result.data
        assert result.metadata["env_var"] == "GOOGLE_AI_KEY"


class TestMercadoPagoIntegration:
    def setup_method(self):
        self.skill = MercadoPagoIntegrationSkill()

    @pytest.mark.asyncio
    async def test_output_is_trimmed(self):
        result = await self.skill.execute({})

        assert result.data == result.data.strip()
        assert "MERCADOPAGO_ACCESS_TOKEN" in result.data
        assert result.metadata["type"] == "NestJS Module"

    @pytest.mark.asyncio
    async def test_generic_variant(self):
        result = await self.skill.execute({"useNestJs": False, "accessTokenEnvVar": "MP_TOKEN"})

        assert "MP_TOKEN" in result.data
        assert result.metadata["type"] == "Generic TS"
