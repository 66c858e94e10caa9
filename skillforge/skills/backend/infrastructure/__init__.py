"""Caching, email, health, logging and realtime infrastructure skills"""

from skillforge.skills.backend.infrastructure.cache_manager import CacheManagerSkill
from skillforge.skills.backend.infrastructure.email_service import EmailServiceSkill
from skillforge.skills.backend.infrastructure.health_check_builder import HealthCheckBuilderSkill
from skillforge.skills.backend.infrastructure.logger_provider import LoggerProviderSkill
from skillforge.skills.backend.infrastructure.websocket_gateway import WebSocketGatewaySkill

__all__ = [
    "CacheManagerSkill",
    "EmailServiceSkill",
    "HealthCheckBuilderSkill",
    "LoggerProviderSkill",
    "WebSocketGatewaySkill",
]
