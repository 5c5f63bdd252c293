"""
Download-links API Layer.

This package handles all communication with the Minecraft services API that
publishes the current Bedrock server download links.
"""

from .client import BedrockLinksClient, parse_links_payload

__all__ = ["BedrockLinksClient", "parse_links_payload"]
