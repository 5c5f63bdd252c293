"""
bedrock-tracker: keeps a ledger of published Minecraft Bedrock server downloads.
"""

__version__ = "1.0.0"
