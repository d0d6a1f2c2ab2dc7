# Business logic services

from .location_service import LocationResolver, placeholder_location, location_from_components
from .prompt_builder import PromptPair, build_prompts, build_system_prompt, build_user_prompt
from .ai_service import ModelGateway, to_data_url, build_user_content, extract_content_text

__all__ = [
    'LocationResolver',
    'placeholder_location',
    'location_from_components',
    'PromptPair',
    'build_prompts',
    'build_system_prompt',
    'build_user_prompt',
    'ModelGateway',
    'to_data_url',
    'build_user_content',
    'extract_content_text',
]
