"""
Social search credentials.

Contains credentials for Twitter/X and ForumScout (LinkedIn, Reddit).
"""

from jam_core.credentials import CredentialField, CredentialSpec

SOCIAL_CREDENTIALS = {
    "twitter": CredentialSpec(
        service="twitter",
        display_name="TwitterAPI.io",
        fields=[CredentialField("api_key", "JAM_TWITTERAPI_IO_KEY", label="API key")],
        node_types=["twitter_monitor"],
        help_url="https://twitterapi.io/dashboard",
        description="API key for twitterapi.io tweet search",
    ),
    "forumscout": CredentialSpec(
        service="forumscout",
        display_name="ForumScout",
        fields=[CredentialField("api_key", "JAM_FORUMSCOUT_API_KEY", label="API key")],
        node_types=["linkedin_monitor", "reddit_monitor"],
        help_url="https://forumscout.app/developers",
        description="API key for ForumScout LinkedIn and Reddit search",
    ),
}
