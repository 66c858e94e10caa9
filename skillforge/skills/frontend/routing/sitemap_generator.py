"""
SitemapGenerator Skill

Generates Next.js ``app/sitemap.ts`` (static plus dynamic route prefixes)
and ``app/robots.ts`` for a site base URL.
"""

from pydantic import Field, field_validator

from skillforge.skills.base import BaseSkill, SkillParams, SkillResult
from skillforge.skills.templating import check_url, js_json, strip_trailing_slash


class SitemapGeneratorParams(SkillParams):
    base_url: str = Field(description="The base URL of the website, e.g., https://mysite.com")
    dynamic_routes: list[str] = Field(
        description='List of dynamic route prefixes to include, e.g., ["/blog", "/products"]'
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        return check_url(v)


def _sitemap(base_url: str, dynamic_routes: list[str]) -> str:
    return f"""import {{ MetadataRoute }} from 'next';

export default function sitemap(): MetadataRoute.Sitemap {{
  const baseUrl = '{base_url}';

  // Static routes
  const routes = [
    '',
    '/about',
    '/contact',
    // Add more static routes here
  ].map((route) => ({{
    url: `${{baseUrl}}${{route}}`,
    lastModified: new Date(),
    changeFrequency: 'daily' as const,
    priority: route === '' ? 1 : 0.8,
  }}));

  // Dynamic routes placeholder - in a real app, you might fetch ids from a DB
  // This demonstrates how to structure the logic
  const dynamicEntries = {js_json(dynamic_routes)}.flatMap(prefix => {{
     // Example: return fetch(`${{baseUrl}}/api${{prefix}}`).then(res => res.json())...
     // For now, we return a generic entry
     return [
       {{
         url: `${{baseUrl}}${{prefix}}`,
         lastModified: new Date(),
         changeFrequency: 'weekly' as const,
         priority: 0.5,
       }}
     ];
  }});

  return [...routes, ...dynamicEntries];
}}
"""


def _robots(base_url: str) -> str:
    return f"""import {{ MetadataRoute }} from 'next';

export default function robots(): MetadataRoute.Robots {{
  const baseUrl = '{base_url}';

  return {{
    rules: {{
      userAgent: '*',
      allow: '/',
      disallow: ['/private/', '/admin/'],
    }},
    sitemap: `${{baseUrl}}/sitemap.xml`,
  }};
}}
"""


class SitemapGeneratorSkill(BaseSkill[SitemapGeneratorParams]):
    name = "sitemap_generator"
    description = "Generates dynamic sitemap.ts and robots.ts files for SEO."
    category = "frontend.routing"
    params_model = SitemapGeneratorParams

    async def handle(self, params: SitemapGeneratorParams) -> SkillResult:
        base_url = strip_trailing_slash(params.base_url)
        files = {
            "app/sitemap.ts": _sitemap(base_url, params.dynamic_routes),
            "app/robots.ts": _robots(base_url),
        }
        return SkillResult.ok(files, {"base_url": params.base_url, "sitemap_type": "dynamic"})
