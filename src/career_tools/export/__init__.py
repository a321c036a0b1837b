"""Plain-text export for career tool results."""
from career_tools.export.text_export import default_filename, export_text, render_text

__all__ = ["default_filename", "export_text", "render_text"]
