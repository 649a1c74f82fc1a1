from .prompts import build_prompt, validate_request
from .completion import CompletionClient, OpenAIProvider
from .parser import parse, parse_response
from .name_generator import NameGenerator

__all__ = [
    'build_prompt', 'validate_request', 'CompletionClient', 'OpenAIProvider',
    'parse', 'parse_response', 'NameGenerator'
]
