"""
FormFactory Skill

Generates a react-hook-form component built from shadcn/ui form primitives,
with a Zod schema derived from each field's type.
"""

from typing import Literal

from pydantic import Field

from skillforge.skills.base import BaseSkill, SkillParams, SkillResult


class FormField(SkillParams):
    name: str
    type: Literal["text", "number", "email", "select"]
    label: str


class FormFactoryParams(SkillParams):
    # exposed as "fields" on the wire
    form_fields: list[FormField] = Field(
        alias="fields", description="List of form fields to generate"
    )
    submit_endpoint: str = Field(description="API endpoint where the form submits data")


def _zod_rule(field: FormField) -> str:
    if field.type == "email":
        return f'  {field.name}: z.string().email({{ message: "Invalid email address" }}),'
    if field.type == "number":
        return (
            f'  {field.name}: z.coerce.number().min(0, '
            f'{{ message: "{field.label} must be positive" }}),'
        )
    return (
        f'  {field.name}: z.string().min(2, '
        f'{{ message: "{field.label} must be at least 2 characters" }}),'
    )


def _control(field: FormField) -> str:
    if field.type == "select":
        return f"""<Select onValueChange={{field.onChange}} defaultValue={{field.value}}>
                        <SelectTrigger>
                          <SelectValue placeholder="Select {field.label}" />
                        </SelectTrigger>
                        <SelectContent>
                          <SelectItem value="option1">Option 1</SelectItem>
                        </SelectContent>
                       </Select>"""
    return f'<Input type="{field.type}" placeholder="{field.label}" {{...field}} />'


def _field_jsx(field: FormField) -> str:
    return f"""
        <FormField
          control={{form.control}}
          name="{field.name}"
          render={{({{ field }}) => (
            <FormItem>
              <FormLabel>{field.label}</FormLabel>
              <FormControl>
                {_control(field)}
              </FormControl>
              <FormMessage />
            </FormItem>
          )}}
        />"""


class FormFactorySkill(BaseSkill[FormFactoryParams]):
    name = "form_factory"
    description = (
        "Generates robust forms using Shadcn UI components and Zod validation automatically."
    )
    category = "frontend.logic"
    params_model = FormFactoryParams

    async def handle(self, params: FormFactoryParams) -> SkillResult:
        fields = params.form_fields
        rules = "\n".join(_zod_rule(f) for f in fields)
        schema = f"const formSchema = z.object({{\n{rules}\n}});"
        defaults = ",\n      ".join(f'{f.name}: ""' for f in fields)
        jsx = "\n".join(_field_jsx(f) for f in fields)

        code = f"""
import {{ zodResolver }} from "@hookform/resolvers/zod"
import {{ useForm }} from "react-hook-form"
import {{ z }} from "zod"
import {{ Button }} from "@/components/ui/button"
import {{
  Form,
  FormControl,
  FormField,
  FormItem,
  FormLabel,
  FormMessage,
}} from "@/components/ui/form"
import {{ Input }} from "@/components/ui/input"
import {{ Select, SelectContent, SelectItem, SelectTrigger, SelectValue }} from "@/components/ui/select"

{schema}

export function GeneratedForm() {{
  const form = useForm<z.infer<typeof formSchema>>({{
    resolver: zodResolver(formSchema),
    defaultValues: {{
      {defaults}
    }},
  }})

  function onSubmit(values: z.infer<typeof formSchema>) {{
    console.log("Submitting to {params.submit_endpoint}", values)
  }}

  return (
    <Form {{...form}}>
      <form onSubmit={{form.handleSubmit(onSubmit)}} className="space-y-8">
        {jsx}
        <Button type="submit">Submit</Button>
      </form>
    </Form>
  )
}}
"""

        return SkillResult.ok(code, {"generated_fields": len(fields), "validation": "zod"})
