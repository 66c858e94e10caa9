"""
ThemeSwitcher Skill

Generates a React context theme provider persisting light/dark/system to
localStorage, and optionally a shadcn/ui dropdown toggle.
"""

from typing import Literal

from pydantic import Field

from skillforge.skills.base import BaseSkill, SkillParams, SkillResult


class ThemeSwitcherParams(SkillParams):
    default_theme: Literal["light", "dark", "system"] = Field(default="system")
    storage_key: str = Field(default="theme")
    generate_toggle: bool = Field(default=True)


THEME_TOGGLE = """"use client";
import { useTheme } from "./theme-provider";
import { Button } from "@/components/ui/button";
import { DropdownMenu, DropdownMenuContent, DropdownMenuItem, DropdownMenuTrigger } from "@/components/ui/dropdown-menu";
import { Moon, Sun, Laptop } from "lucide-react";

export function ThemeToggle() {
  const { theme, setTheme } = useTheme();

  return (
    <DropdownMenu>
      <DropdownMenuTrigger asChild>
        <Button variant="outline" size="icon">
          <Sun className="h-4 w-4 rotate-0 scale-100 transition-all dark:-rotate-90 dark:scale-0" />
          <Moon className="absolute h-4 w-4 rotate-90 scale-0 transition-all dark:rotate-0 dark:scale-100" />
          <span className="sr-only">Toggle theme</span>
        </Button>
      </DropdownMenuTrigger>
      <DropdownMenuContent align="end">
        <DropdownMenuItem onClick={() => setTheme("light")}>
          <Sun className="mr-2 h-4 w-4" /> Light
        </DropdownMenuItem>
        <DropdownMenuItem onClick={() => setTheme("dark")}>
          <Moon className="mr-2 h-4 w-4" /> Dark
        </DropdownMenuItem>
        <DropdownMenuItem onClick={() => setTheme("system")}>
          <Laptop className="mr-2 h-4 w-4" /> System
        </DropdownMenuItem>
      </DropdownMenuContent>
    </DropdownMenu>
  );
}
"""


def _theme_provider(default_theme: str, storage_key: str) -> str:
    return f""""use client";
import {{ createContext, useContext, useEffect, useState }} from "react";

type Theme = "dark" | "light" | "system";

interface ThemeContextType {{
  theme: Theme;
  setTheme: (theme: Theme) => void;
}}

const ThemeContext = createContext<ThemeContextType | undefined>(undefined);

export function ThemeProvider({{ children }}: {{ children: React.ReactNode }}) {{
  const [theme, setTheme] = useState<Theme>("{default_theme}");

  useEffect(() => {{
    const stored = localStorage.getItem("{storage_key}") as Theme;
    if (stored) setTheme(stored);
  }}, []);

  useEffect(() => {{
    const root = window.document.documentElement;
    root.classList.remove("light", "dark");

    if (theme === "system") {{
      const systemTheme = window.matchMedia("(prefers-color-scheme: dark)").matches ? "dark" : "light";
      root.classList.add(systemTheme);
    }} else {{
      root.classList.add(theme);
    }}

    localStorage.setItem("{storage_key}", theme);
  }}, [theme]);

  return (
    <ThemeContext.Provider value={{{{ theme, setTheme }}}}>
      {{children}}
    </ThemeContext.Provider>
  );
}}

export function useTheme() {{
  const context = useContext(ThemeContext);
  if (!context) throw new Error("useTheme must be used within ThemeProvider");
  return context;
}}
"""


class ThemeSwitcherSkill(BaseSkill[ThemeSwitcherParams]):
    name = "theme_switcher"
    description = "Generates dark/light mode theme provider and toggle component."
    category = "frontend.infrastructure"
    params_model = ThemeSwitcherParams

    async def handle(self, params: ThemeSwitcherParams) -> SkillResult:
        files = {"theme-provider.tsx": _theme_provider(params.default_theme, params.storage_key)}
        if params.generate_toggle:
            files["theme-toggle.tsx"] = THEME_TOGGLE

        return SkillResult.ok(
            files, {"default_theme": params.default_theme, "generated_files": list(files)}
        )
