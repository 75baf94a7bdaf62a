"""Text generators."""

from . import design_notes, final_copy, image_prompt  # noqa: F401
