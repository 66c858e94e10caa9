"""Business logic integration skills (uploads, AI, payments)"""

from skillforge.skills.backend.logic.file_upload_manager import FileUploadManagerSkill
from skillforge.skills.backend.logic.gemini_integration import GeminiIntegrationSkill
from skillforge.skills.backend.logic.mercado_pago_integration import MercadoPagoIntegrationSkill

__all__ = [
    "FileUploadManagerSkill",
    "GeminiIntegrationSkill",
    "MercadoPagoIntegrationSkill",
]
