"""
Assistant App - AI review summaries and product Q&A.

Talks to an OpenAI-compatible chat-completions endpoint. The rest of the
project treats it as an unreliable collaborator: summaries are best effort,
chat failures surface to the caller as 502/503.
"""
