"""File uploads used by batch and fine-tuning jobs."""

from openai_tools.files.request import FilePurpose, Files
from openai_tools.files.response import File

__all__ = ["File", "FilePurpose", "Files"]
