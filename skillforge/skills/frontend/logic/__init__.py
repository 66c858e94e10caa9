"""Hook, data fetching and form skills"""

from skillforge.skills.frontend.logic.analyze_hook_logic import AnalyzeHookLogicSkill
from skillforge.skills.frontend.logic.data_fetching import DataFetchingSkill
from skillforge.skills.frontend.logic.form_factory import FormFactorySkill
from skillforge.skills.frontend.logic.infinite_scroll import InfiniteScrollSkill

__all__ = [
    "AnalyzeHookLogicSkill",
    "DataFetchingSkill",
    "FormFactorySkill",
    "InfiniteScrollSkill",
]
