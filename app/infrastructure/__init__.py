"""Infrastructure modules for TableBot.

Cross-cutting components shared by every command:
- clients: Outbound HTTP client
- commands: Command registry, dispatcher and execution context
- operations: Operation results and error classification
- platforms: Discord client, command adapter and embed formatting
"""
