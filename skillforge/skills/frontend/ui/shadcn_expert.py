"""
ShadcnExpert Skill

Generates a shadcn/ui component (card, form, data table or modal) that lays
out the given data fields.
"""

from typing import Literal

from pydantic import Field

from skillforge.skills.base import BaseSkill, SkillParams, SkillResult
from skillforge.skills.templating import capitalize

ComponentType = Literal["card", "form", "data-table", "modal"]


class ShadcnParams(SkillParams):
    component_type: ComponentType = Field(description="Type of component to generate")
    data_fields: list[str] = Field(description="List of data fields to include")


def _card(fields: list[str]) -> str:
    rows = "\n".join(
        f"""        <div className="flex justify-between">
          <span className="text-muted-foreground">{capitalize(f)}</span>
          <span className="font-medium">{{data.{f}}}</span>
        </div>"""
        for f in fields
    )
    return f"""import {{ Card, CardContent, CardHeader, CardTitle }} from "@/components/ui/card";

export function DataCard({{ title, data }}: {{ title: string; data: Record<string, any> }}) {{
  return (
    <Card className="dark:bg-zinc-900">
      <CardHeader>
        <CardTitle>{{title}}</CardTitle>
      </CardHeader>
      <CardContent className="space-y-2">
{rows}
      </CardContent>
    </Card>
  );
}}
"""


def _form(fields: list[str]) -> str:
    inputs = "\n".join(
        f"""      <div className="grid gap-2">
        <Label htmlFor="{f}">{capitalize(f)}</Label>
        <Input id="{f}" name="{f}" />
      </div>"""
        for f in fields
    )
    return f"""import {{ Button }} from "@/components/ui/button";
import {{ Input }} from "@/components/ui/input";
import {{ Label }} from "@/components/ui/label";

export function DataForm({{ onSubmit }}: {{ onSubmit: (data: FormData) => void }}) {{
  return (
    <form action={{onSubmit}} className="space-y-4">
{inputs}
      <Button type="submit">Save</Button>
    </form>
  );
}}
"""


def _data_table(fields: list[str]) -> str:
    heads = "\n".join(f"          <TableHead>{capitalize(f)}</TableHead>" for f in fields)
    cells = "\n".join(f"            <TableCell>{{row.{f}}}</TableCell>" for f in fields)
    return f"""import {{
  Table,
  TableBody,
  TableCell,
  TableHead,
  TableHeader,
  TableRow,
}} from "@/components/ui/table";

export function DataTable({{ rows }}: {{ rows: Record<string, any>[] }}) {{
  return (
    <Table>
      <TableHeader>
        <TableRow>
{heads}
        </TableRow>
      </TableHeader>
      <TableBody>
        {{rows.map((row, index) => (
          <TableRow key={{index}}>
{cells}
          </TableRow>
        ))}}
      </TableBody>
    </Table>
  );
}}
"""


def _modal(fields: list[str]) -> str:
    rows = "\n".join(
        f"""          <p><span className="text-muted-foreground">{capitalize(f)}:</span> {{data.{f}}}</p>"""
        for f in fields
    )
    return f"""import {{ Button }} from "@/components/ui/button";
import {{
  Dialog,
  DialogContent,
  DialogHeader,
  DialogTitle,
  DialogTrigger,
}} from "@/components/ui/dialog";

export function DataModal({{ title, data }}: {{ title: string; data: Record<string, any> }}) {{
  return (
    <Dialog>
      <DialogTrigger asChild>
        <Button variant="outline">View details</Button>
      </DialogTrigger>
      <DialogContent>
        <DialogHeader>
          <DialogTitle>{{title}}</DialogTitle>
        </DialogHeader>
        <div className="space-y-2">
{rows}
        </div>
      </DialogContent>
    </Dialog>
  );
}}
"""


RENDERERS = {
    "card": _card,
    "form": _form,
    "data-table": _data_table,
    "modal": _modal,
}


class ShadcnExpertSkill(BaseSkill[ShadcnParams]):
    name = "apply_shadcn_style"
    description = (
        "Aplica componentes de Shadcn UI (Cards, Dialogs, Tables) siguiendo el sistema de "
        "diseño moderno y dark mode."
    )
    category = "frontend.ui"
    params_model = ShadcnParams

    async def handle(self, params: ShadcnParams) -> SkillResult:
        header = (
            f"// Shadcn {params.component_type} component\n"
            f"// Fields: {', '.join(params.data_fields)}\n"
        )
        code = header + RENDERERS[params.component_type](params.data_fields)
        return SkillResult.ok(code, {"style": "shadcn/ui", "component": params.component_type})
