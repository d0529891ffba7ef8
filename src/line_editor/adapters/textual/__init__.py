from .controller import EditorUIHooks, TextualEditorAdapter, format_status

__all__ = ["EditorUIHooks", "TextualEditorAdapter", "format_status"]
