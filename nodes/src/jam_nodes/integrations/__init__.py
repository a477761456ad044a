"""Nodes that call external APIs."""

from jam_nodes.integrations.apollo import SearchContactsInput, SearchContactsOutput, search_contacts_node
from jam_nodes.integrations.http_request import HttpRequestInput, HttpRequestOutput, http_request_node
from jam_nodes.integrations.linkedin import LinkedInMonitorInput, LinkedInMonitorOutput, linkedin_monitor_node
from jam_nodes.integrations.reddit import RedditMonitorInput, RedditMonitorOutput, reddit_monitor_node
from jam_nodes.integrations.seo import (
    SeoAuditInput,
    SeoAuditOutput,
    SeoKeywordResearchInput,
    SeoKeywordResearchOutput,
    seo_audit_node,
    seo_keyword_research_node,
)
from jam_nodes.integrations.sora import SoraVideoInput, SoraVideoOutput, sora_video_node
from jam_nodes.integrations.twitter import TwitterMonitorInput, TwitterMonitorOutput, twitter_monitor_node

__all__ = [
    "HttpRequestInput",
    "HttpRequestOutput",
    "LinkedInMonitorInput",
    "LinkedInMonitorOutput",
    "RedditMonitorInput",
    "RedditMonitorOutput",
    "SearchContactsInput",
    "SearchContactsOutput",
    "SeoAuditInput",
    "SeoAuditOutput",
    "SeoKeywordResearchInput",
    "SeoKeywordResearchOutput",
    "SoraVideoInput",
    "SoraVideoOutput",
    "TwitterMonitorInput",
    "TwitterMonitorOutput",
    "http_request_node",
    "linkedin_monitor_node",
    "reddit_monitor_node",
    "search_contacts_node",
    "seo_audit_node",
    "seo_keyword_research_node",
    "sora_video_node",
    "twitter_monitor_node",
]
