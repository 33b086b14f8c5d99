# Transcript Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

"""Sample transcripts used by the smoke test and the test suite."""

SAMPLE_TRANSCRIPT_CONTENT = """\
- 00:00:15 introduction Welcome everyone to today's product planning meeting. I'm Sarah, the product manager, and we'll be discussing our Q2 roadmap priorities.

- 00:01:30 agenda Today we'll cover three main areas: user feedback analysis, feature prioritization, and resource allocation for the upcoming quarter.

- 00:02:45 user-feedback Let me start with the user feedback we've collected. We received over 500 responses to our recent survey, and the results are quite interesting.

- 00:03:20 user-feedback The top requested feature is dark mode support, mentioned by 78% of respondents. This is significantly higher than we anticipated.

- 00:05:00 technical-discussion From a technical perspective, implementing dark mode shouldn't be too complex. We already have the design system in place.

- 00:06:30 concerns I'm a bit concerned about the timeline. Dark mode could take 2-3 weeks, but mobile optimization might need 6-8 weeks of development time.

- 00:07:15 prioritization Given our Q2 deadline, I suggest we prioritize dark mode first since it has higher user demand and lower implementation complexity.

- 00:09:30 timeline So our proposed timeline is: dark mode in Sprint 1-2, mobile performance optimization in Sprint 3-4, assuming we can secure the additional resources.

- 00:14:00 action-items Let me summarize our action items: Sarah will create detailed tickets, the design team will finalize dark mode assets, and engineering will start sprint planning.

- 00:15:30 conclusion Thank you everyone for a productive meeting. I'm excited to see these improvements come to life and address our users' top concerns.
"""

# Typical speech-to-text output: mixed line shapes plus a header line.
SAMPLE_SPEECH_TO_TEXT_CONTENT = """\
Interview transcript

[00:00:05] Interviewer: Welcome to the interview.
[00:00:12] Candidate: Thank you for having me.
00:00:18 Interviewer: Can you tell me about your experience?
Candidate: [00:00:25] I have worked as a backend developer for six years.
[00:01:02] Interviewer: What did you enjoy most about that role?
"""
