"""
ResponsiveUI Skill

Devuelve la guía de layout mobile-first (Tailwind) para una interfaz.
"""

from pydantic import Field

from skillforge.skills.base import BaseSkill, SkillParams, SkillResult


class ResponsiveLayoutParams(SkillParams):
    component_description: str = Field(
        description="Descripción de la interfaz (ej. Dashboard de métricas)"
    )
    constraints: list[str] | None = Field(
        default=None, description="Restricciones como 'sin scroll horizontal'"
    )


class ResponsiveLayoutSkill(BaseSkill[ResponsiveLayoutParams]):
    name = "generate_responsive_layout"
    description = (
        "Crea layouts modernos con Tailwind asegurando adaptabilidad en móviles y "
        "pantallas pequeñas usando Shadcn."
    )
    category = "frontend.ui"
    params_model = ResponsiveLayoutParams

    async def handle(self, params: ResponsiveLayoutParams) -> SkillResult:
        lines = [
            "Estructura generada con estrategia Mobile-First para: "
            f"{params.component_description}.",
            "Se aplicaron breakpoints 'sm' y 'md' para asegurar los 60fps y legibilidad "
            "en pantallas chicas.",
            "Clases sugeridas: 'grid grid-cols-1 md:grid-cols-12 gap-4 p-4'",
        ]
        if params.constraints:
            lines.append(f"Restricciones respetadas: {', '.join(params.constraints)}")

        return SkillResult.ok(
            "\n".join(lines), {"strategy": "mobile-first", "breakpoints": ["sm", "md"]}
        )
