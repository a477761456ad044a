"""
Data provider credentials.

Contains credentials for contact search and SEO data.
"""

from jam_core.credentials import CredentialField, CredentialSpec

DATA_CREDENTIALS = {
    "apollo": CredentialSpec(
        service="apollo",
        display_name="Apollo.io",
        fields=[CredentialField("api_key", "JAM_APOLLO_API_KEY", label="API key")],
        node_types=["search_contacts"],
        help_url="https://app.apollo.io/#/settings/integrations/api",
        description="API key for Apollo.io people search and enrichment",
        api_key_instructions="""To get an Apollo.io API key:
1. Sign in at https://app.apollo.io
2. Open Settings > Integrations > API
3. Create a new key and copy it""",
        health_check_endpoint="https://api.apollo.io/api/v1/auth/health",
    ),
    "dataforseo": CredentialSpec(
        service="dataforseo",
        display_name="DataForSEO",
        fields=[
            CredentialField("login", "JAM_DATAFORSEO_LOGIN", label="Login", secret=False),
            CredentialField("password", "JAM_DATAFORSEO_PASSWORD", label="Password"),
        ],
        node_types=["seo_keyword_research", "seo_audit"],
        help_url="https://app.dataforseo.com/api-access",
        description="API login and password for DataForSEO",
        api_key_instructions="""To get DataForSEO credentials:
1. Sign up at https://dataforseo.com
2. Open Dashboard > API Access
3. Copy the API login and password""",
        health_check_endpoint="https://api.dataforseo.com/v3/appendix/user_data",
    ),
}
