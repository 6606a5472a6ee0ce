"""Discord platform layer.

Key Components:
    - clients.discord: DiscordBot, a discord.Client with explicit event subscriptions
    - formatters.discord: Reply/Card -> discord.Embed rendering and markdown helpers
"""
