"""UI component and copy skills"""

from skillforge.skills.frontend.ui.ai_copywriter_ui import AiCopywriterSkill
from skillforge.skills.frontend.ui.feedback_system import FeedbackSystemSkill
from skillforge.skills.frontend.ui.responsive_ui import ResponsiveLayoutSkill
from skillforge.skills.frontend.ui.shadcn_expert import ShadcnExpertSkill
from skillforge.skills.frontend.ui.skeleton_loader import SkeletonLoaderSkill
from skillforge.skills.frontend.ui.table_generator import TableGeneratorSkill
from skillforge.skills.frontend.ui.toast_notification import ToastNotificationSkill
from skillforge.skills.frontend.ui.ui_polish import UiPolishSkill

__all__ = [
    "AiCopywriterSkill",
    "FeedbackSystemSkill",
    "ResponsiveLayoutSkill",
    "ShadcnExpertSkill",
    "SkeletonLoaderSkill",
    "TableGeneratorSkill",
    "ToastNotificationSkill",
    "UiPolishSkill",
]
