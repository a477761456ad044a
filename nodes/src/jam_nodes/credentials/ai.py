"""
AI provider credentials.

Contains credentials for text and video generation providers.
"""

from jam_core.credentials import CredentialField, CredentialSpec

AI_CREDENTIALS = {
    "anthropic": CredentialSpec(
        service="anthropic",
        display_name="Anthropic",
        fields=[CredentialField("api_key", "JAM_ANTHROPIC_API_KEY", label="API key")],
        node_types=["social_keyword_generator", "draft_emails", "social_ai_analyze"],
        help_url="https://console.anthropic.com/settings/keys",
        description="API key for Claude text generation",
        api_key_instructions="""To get an Anthropic API key:
1. Sign in at https://console.anthropic.com
2. Open Settings > API Keys
3. Click "Create Key" and copy it""",
        health_check_endpoint="https://api.anthropic.com/v1/models",
    ),
    "openai": CredentialSpec(
        service="openai",
        display_name="OpenAI",
        fields=[CredentialField("api_key", "JAM_OPENAI_API_KEY", label="API key")],
        node_types=["sora_video"],
        help_url="https://platform.openai.com/api-keys",
        description="API key for Sora video generation",
        api_key_instructions="""To get an OpenAI API key:
1. Sign in at https://platform.openai.com
2. Open API keys
3. Click "Create new secret key" and copy it""",
        health_check_endpoint="https://api.openai.com/v1/models",
    ),
}
