"""
TableGenerator Skill

Generates a TanStack Table component on shadcn/ui primitives with sortable
column headers and optional global search, pagination and a row-actions menu.

An empty ``columns`` list is valid: the table renders with only the ``id``
field on its row type (and the actions column, when enabled).
"""

from pydantic import Field

from skillforge.skills.base import BaseSkill, SkillParams, SkillResult


class TableColumn(SkillParams):
    key: str
    label: str
    sortable: bool = True


class TableGeneratorParams(SkillParams):
    table_name: str = Field(description="Table component name (PascalCase)")
    columns: list[TableColumn]
    with_pagination: bool = Field(default=True)
    with_search: bool = Field(default=True)
    with_row_actions: bool = Field(default=True)


ROW_ACTIONS_COLUMN = """{
    id: "actions",
    cell: ({ row }) => (
      <DropdownMenu>
        <DropdownMenuTrigger asChild>
          <Button variant="ghost" className="h-8 w-8 p-0">
            <MoreHorizontal className="h-4 w-4" />
          </Button>
        </DropdownMenuTrigger>
        <DropdownMenuContent align="end">
          <DropdownMenuItem>Edit</DropdownMenuItem>
          <DropdownMenuItem className="text-destructive">Delete</DropdownMenuItem>
        </DropdownMenuContent>
      </DropdownMenu>
    ),
  },"""

SEARCH_INPUT = """<Input
        placeholder="Search..."
        value={globalFilter}
        onChange={(e) => setGlobalFilter(e.target.value)}
        className="max-w-sm"
      />"""

PAGINATION_CONTROLS = """<div className="flex items-center justify-end gap-2">
        <Button variant="outline" size="sm" onClick={() => table.previousPage()} disabled={!table.getCanPreviousPage()}>
          Previous
        </Button>
        <Button variant="outline" size="sm" onClick={() => table.nextPage()} disabled={!table.getCanNextPage()}>
          Next
        </Button>
      </div>"""


def _column_def(column: TableColumn) -> str:
    if column.sortable:
        header = f"""({{ column }}) => (
      <Button variant="ghost" onClick={{() => column.toggleSorting(column.getIsSorted() === "asc")}}>
        {column.label}
        <ArrowUpDown className="ml-2 h-4 w-4" />
      </Button>
    )"""
    else:
        header = f'"{column.label}"'
    return f"""
  {{
    accessorKey: "{column.key}",
    header: {header},
  }},"""


class TableGeneratorSkill(BaseSkill[TableGeneratorParams]):
    name = "table_generator"
    description = "Generates TanStack Table with sorting, filtering, pagination, and row actions."
    category = "frontend.ui"
    params_model = TableGeneratorParams

    async def handle(self, params: TableGeneratorParams) -> SkillResult:
        name = params.table_name
        columns = params.columns

        row_fields = "\n  ".join(f"{c.key}: string;" for c in columns)
        column_defs = "".join(_column_def(c) for c in columns)
        actions = ROW_ACTIONS_COLUMN if params.with_row_actions else ""
        pagination_model = (
            "getPaginationRowModel: getPaginationRowModel()," if params.with_pagination else ""
        )
        search = SEARCH_INPUT if params.with_search else ""
        pagination = PAGINATION_CONTROLS if params.with_pagination else ""

        code = f""""use client";
import {{ useState }} from "react";
import {{
  ColumnDef,
  flexRender,
  getCoreRowModel,
  getSortedRowModel,
  getFilteredRowModel,
  getPaginationRowModel,
  useReactTable,
  SortingState,
}} from "@tanstack/react-table";
import {{ Table, TableBody, TableCell, TableHead, TableHeader, TableRow }} from "@/components/ui/table";
import {{ Button }} from "@/components/ui/button";
import {{ Input }} from "@/components/ui/input";
import {{ ArrowUpDown, MoreHorizontal }} from "lucide-react";
import {{ DropdownMenu, DropdownMenuContent, DropdownMenuItem, DropdownMenuTrigger }} from "@/components/ui/dropdown-menu";

export type {name}Row = {{
  id: string;
  {row_fields}
}};

const columns: ColumnDef<{name}Row>[] = [
  {column_defs}
  {actions}
];

interface {name}Props {{
  data: {name}Row[];
}}

export function {name}({{ data }}: {name}Props) {{
  const [sorting, setSorting] = useState<SortingState>([]);
  const [globalFilter, setGlobalFilter] = useState("");

  const table = useReactTable({{
    data,
    columns,
    getCoreRowModel: getCoreRowModel(),
    getSortedRowModel: getSortedRowModel(),
    getFilteredRowModel: getFilteredRowModel(),
    {pagination_model}
    onSortingChange: setSorting,
    onGlobalFilterChange: setGlobalFilter,
    state: {{ sorting, globalFilter }},
  }});

  return (
    <div className="space-y-4">
      {search}

      <div className="rounded-md border">
        <Table>
          <TableHeader>
            {{table.getHeaderGroups().map((hg) => (
              <TableRow key={{hg.id}}>
                {{hg.headers.map((h) => (
                  <TableHead key={{h.id}}>
                    {{h.isPlaceholder ? null : flexRender(h.column.columnDef.header, h.getContext())}}
                  </TableHead>
                ))}}
              </TableRow>
            ))}}
          </TableHeader>
          <TableBody>
            {{table.getRowModel().rows?.length ? (
              table.getRowModel().rows.map((row) => (
                <TableRow key={{row.id}}>
                  {{row.getVisibleCells().map((cell) => (
                    <TableCell key={{cell.id}}>
                      {{flexRender(cell.column.columnDef.cell, cell.getContext())}}
                    </TableCell>
                  ))}}
                </TableRow>
              ))
            ) : (
              <TableRow>
                <TableCell colSpan={{columns.length}} className="h-24 text-center">
                  No results.
                </TableCell>
              </TableRow>
            )}}
          </TableBody>
        </Table>
      </div>

      {pagination}
    </div>
  );
}}
"""

        return SkillResult.ok(
            code,
            {
                "table_name": name,
                "columns": len(columns),
                "features": {
                    "with_pagination": params.with_pagination,
                    "with_search": params.with_search,
                    "with_row_actions": params.with_row_actions,
                },
            },
        )
