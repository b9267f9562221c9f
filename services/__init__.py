# Services package
from .llm import LLMClient, extract_json
from .generation import ContentGenerator

__all__ = [
    "LLMClient",
    "extract_json",
    "ContentGenerator",
]
