"""
GenerateNestResource Skill

Generates the module, controller, service and DTO files of a NestJS resource,
mirroring what `nest g resource` scaffolds.
"""

from typing import Literal

from pydantic import Field

from skillforge.skills.base import BaseSkill, SkillParams, SkillResult
from skillforge.skills.templating import capitalize

Component = Literal["module", "controller", "service", "dto", "entity"]


class GenerateNestResourceParams(SkillParams):
    resource_name: str = Field(description='The name of the resource (e.g., "users")')
    path: str = Field(default="src", description="The root path for generation")
    components: list[Component] = Field(
        default=["module", "controller", "service"],
        description="List of components to generate",
    )
    is_crud: bool = Field(default=True, description="Whether to generate CRUD methods")


def _dto_imports(resource: str, class_name: str) -> str:
    return (
        f"import {{ Create{class_name}Dto }} from './dto/create-{resource}.dto';\n"
        f"import {{ Update{class_name}Dto }} from './dto/update-{resource}.dto';\n"
    )


def _controller(resource: str, class_name: str, with_dto: bool, is_crud: bool) -> str:
    create_type = f"Create{class_name}Dto" if with_dto else "any"
    update_type = f"Update{class_name}Dto" if with_dto else "any"
    dto_imports = _dto_imports(resource, class_name) if with_dto else ""

    crud = ""
    if is_crud:
        crud = f"""
  @Post()
  create(@Body() create{class_name}Dto: {create_type}) {{
    return this.{resource}Service.create(create{class_name}Dto);
  }}

  @Get()
  findAll() {{
    return this.{resource}Service.findAll();
  }}

  @Get(':id')
  findOne(@Param('id') id: string) {{
    return this.{resource}Service.findOne(+id);
  }}

  @Patch(':id')
  update(@Param('id') id: string, @Body() update{class_name}Dto: {update_type}) {{
    return this.{resource}Service.update(+id, update{class_name}Dto);
  }}

  @Delete(':id')
  remove(@Param('id') id: string) {{
    return this.{resource}Service.remove(+id);
  }}
"""

    return f"""import {{ Controller, Get, Post, Body, Patch, Param, Delete }} from '@nestjs/common';
import {{ {class_name}Service }} from './{resource}.service';
{dto_imports}
@Controller('{resource}')
export class {class_name}Controller {{
  constructor(private readonly {resource}Service: {class_name}Service) {{}}
{crud}}}
"""


def _service(resource: str, class_name: str, with_dto: bool, is_crud: bool) -> str:
    create_type = f"Create{class_name}Dto" if with_dto else "any"
    update_type = f"Update{class_name}Dto" if with_dto else "any"
    dto_imports = _dto_imports(resource, class_name) if with_dto else ""

    crud = ""
    if is_crud:
        crud = f"""
  create(create{class_name}Dto: {create_type}) {{
    return 'This action adds a new {resource}';
  }}

  findAll() {{
    return `This action returns all {resource}`;
  }}

  findOne(id: number) {{
    return `This action returns a #${{id}} {resource}`;
  }}

  update(id: number, update{class_name}Dto: {update_type}) {{
    return `This action updates a #${{id}} {resource}`;
  }}

  remove(id: number) {{
    return `This action removes a #${{id}} {resource}`;
  }}
"""

    return f"""import {{ Injectable }} from '@nestjs/common';
{dto_imports}
@Injectable()
export class {class_name}Service {{{crud}}}
"""


def _module(resource: str, class_name: str) -> str:
    return f"""import {{ Module }} from '@nestjs/common';
import {{ {class_name}Service }} from './{resource}.service';
import {{ {class_name}Controller }} from './{resource}.controller';

@Module({{
  controllers: [{class_name}Controller],
  providers: [{class_name}Service],
}})
export class {class_name}Module {{}}
"""


class GenerateNestResourceSkill(BaseSkill[GenerateNestResourceParams]):
    """
    Skill that scaffolds a NestJS resource

    Parameters:
        resourceName: Resource name, used verbatim for paths and routes
        path (optional): Root folder (default: "src")
        components (optional): Which files to generate
        isCrud (optional): Whether controller/service get CRUD methods

    Returns:
        Mapping of file path to file content
    """

    name = "generate_nest_resource"
    description = (
        "Generates NestJS module, controller, and service files following modular architecture."
    )
    category = "backend.api"
    params_model = GenerateNestResourceParams

    async def handle(self, params: GenerateNestResourceParams) -> SkillResult:
        resource = params.resource_name
        class_name = capitalize(resource)
        base_path = f"{params.path}/{resource}"
        with_dto = "dto" in params.components

        files: dict[str, str] = {}

        if "controller" in params.components:
            files[f"{base_path}/{resource}.controller.ts"] = _controller(
                resource, class_name, with_dto, params.is_crud
            )

        if "service" in params.components:
            files[f"{base_path}/{resource}.service.ts"] = _service(
                resource, class_name, with_dto, params.is_crud
            )

        if "module" in params.components:
            files[f"{base_path}/{resource}.module.ts"] = _module(resource, class_name)

        if with_dto:
            files[f"{base_path}/dto/create-{resource}.dto.ts"] = (
                f"export class Create{class_name}Dto {{}}\n"
            )
            files[f"{base_path}/dto/update-{resource}.dto.ts"] = (
                "import { PartialType } from '@nestjs/mapped-types';\n"
                f"import {{ Create{class_name}Dto }} from './create-{resource}.dto';\n"
                "\n"
                f"export class Update{class_name}Dto extends PartialType(Create{class_name}Dto) {{}}\n"
            )

        if "entity" in params.components:
            files[f"{base_path}/entities/{resource}.entity.ts"] = (
                f"export class {class_name} {{}}\n"
            )

        return SkillResult.ok(
            files,
            {
                "generated_files": list(files),
                "description": f"Generated NestJS resource for {resource}",
            },
        )
