"""
ToastNotification Skill

Generates a toast provider and ``useToast`` hook for Sonner or
react-hot-toast, plus a usage example.

The example imports ``./use-toast`` and is generated even when
``generateHook`` is false.
"""

from typing import Literal

from pydantic import Field

from skillforge.skills.base import BaseSkill, SkillParams, SkillResult


class ToastNotificationParams(SkillParams):
    provider: Literal["sonner", "react-hot-toast"] = Field(default="sonner")
    with_custom_styles: bool = Field(default=True)
    generate_hook: bool = Field(default=True)


SONNER_CLASS_NAMES = """classNames: {
          toast: "bg-background border-border",
          title: "text-foreground",
          description: "text-muted-foreground",
          success: "!bg-green-500/10 !border-green-500/20",
          error: "!bg-destructive/10 !border-destructive/20",
          warning: "!bg-yellow-500/10 !border-yellow-500/20",
          info: "!bg-blue-500/10 !border-blue-500/20",
        },"""

SONNER_HOOK = """import { toast } from "sonner";

interface ToastOptions {
  description?: string;
  duration?: number;
  action?: { label: string; onClick: () => void };
}

export function useToast() {
  const success = (message: string, options?: ToastOptions) => {
    toast.success(message, {
      description: options?.description,
      duration: options?.duration,
      action: options?.action ? {
        label: options.action.label,
        onClick: options.action.onClick,
      } : undefined,
    });
  };

  const error = (message: string, options?: ToastOptions) => {
    toast.error(message, {
      description: options?.description,
      duration: options?.duration || 5000,
    });
  };

  const warning = (message: string, options?: ToastOptions) => {
    toast.warning(message, { description: options?.description });
  };

  const info = (message: string, options?: ToastOptions) => {
    toast.info(message, { description: options?.description });
  };

  const loading = (message: string) => {
    return toast.loading(message);
  };

  const dismiss = (toastId?: string | number) => {
    toast.dismiss(toastId);
  };

  const promise = <T>(
    promise: Promise<T>,
    messages: { loading: string; success: string; error: string }
  ) => {
    return toast.promise(promise, messages);
  };

  return { success, error, warning, info, loading, dismiss, promise };
}
"""

HOT_TOAST_STYLES = """style: {
          background: "hsl(var(--background))",
          color: "hsl(var(--foreground))",
          border: "1px solid hsl(var(--border))",
        },
        success: { iconTheme: { primary: "#22c55e", secondary: "#fff" } },
        error: { iconTheme: { primary: "#ef4444", secondary: "#fff" } },"""

HOT_TOAST_HOOK = """import toast from "react-hot-toast";

export function useToast() {
  return {
    success: (message: string) => toast.success(message),
    error: (message: string) => toast.error(message),
    loading: (message: string) => toast.loading(message),
    dismiss: (id?: string) => toast.dismiss(id),
    promise: <T>(promise: Promise<T>, msgs: { loading: string; success: string; error: string }) =>
      toast.promise(promise, msgs),
  };
}
"""

USAGE_EXAMPLE = """import { useToast } from "./use-toast";

function MyComponent() {
  const toast = useToast();

  const handleSave = async () => {
    toast.promise(saveData(), {
      loading: "Saving...",
      success: "Saved successfully!",
      error: "Failed to save",
    });
  };

  const handleDelete = () => {
    toast.error("Item deleted", { description: "This action cannot be undone" });
  };

  return <button onClick={handleSave}>Save</button>;
}
"""


def _sonner_provider(with_custom_styles: bool) -> str:
    styles = SONNER_CLASS_NAMES if with_custom_styles else ""
    return f""""use client";
import {{ Toaster }} from "sonner";

export function ToastProvider() {{
  return (
    <Toaster
      position="top-right"
      toastOptions={{{{
        {styles}
        duration: 4000,
      }}}}
      richColors
      closeButton
    />
  );
}}
"""


def _hot_toast_provider(with_custom_styles: bool) -> str:
    styles = HOT_TOAST_STYLES if with_custom_styles else ""
    return f""""use client";
import {{ Toaster }} from "react-hot-toast";

export function ToastProvider() {{
  return (
    <Toaster
      position="top-right"
      toastOptions={{{{
        duration: 4000,
        {styles}
      }}}}
    />
  );
}}
"""


class ToastNotificationSkill(BaseSkill[ToastNotificationParams]):
    name = "toast_notification_system"
    description = "Generates toast notification system with Sonner or react-hot-toast."
    category = "frontend.ui"
    params_model = ToastNotificationParams

    async def handle(self, params: ToastNotificationParams) -> SkillResult:
        files: dict[str, str] = {}
        if params.provider == "sonner":
            files["toast-provider.tsx"] = _sonner_provider(params.with_custom_styles)
            hook = SONNER_HOOK
        else:
            files["toast-provider.tsx"] = _hot_toast_provider(params.with_custom_styles)
            hook = HOT_TOAST_HOOK

        if params.generate_hook:
            files["use-toast.ts"] = hook
        files["usage-example.tsx"] = USAGE_EXAMPLE

        return SkillResult.ok(
            files, {"provider": params.provider, "generated_files": list(files)}
        )
