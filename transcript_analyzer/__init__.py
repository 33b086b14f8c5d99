"""
Transcript analyzer CLI package.

This package contains a small CLI tool that:
- parses timestamped transcripts (hand-written or speech-to-text output),
- validates the parsed entries and reports every problem by line,
- computes duration, word count and sections,
- optionally asks an LLM for a structured analysis of the conversation.
"""
