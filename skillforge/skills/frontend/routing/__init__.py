"""App Router skills"""

from skillforge.skills.frontend.routing.routing_master import RoutingMasterSkill
from skillforge.skills.frontend.routing.search_params_manager import SearchParamsManagerSkill
from skillforge.skills.frontend.routing.sitemap_generator import SitemapGeneratorSkill

__all__ = [
    "RoutingMasterSkill",
    "SearchParamsManagerSkill",
    "SitemapGeneratorSkill",
]
