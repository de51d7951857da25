"""Fixed minutes-of-meeting templates."""

from .models import TemplateSpec

SYSTEM_PROMPT = "You are a helpful assistant who formats meeting transcriptions."

FORMAL_TEMPLATE = TemplateSpec(
    name="Template-Formal",
    db_field="formal_template",
    instructions="""Summarize the following transcription and format it like this formal Minutes of the Meeting:

[MEETING NAME:]
[DATE:]
[TIME:]
[VENUE:]
[PRESENT:]

[CALL TO ORDER:]
[Who started the meeting and at what time.]

[MATTERS ARISING:]
• Bullet points of major topics.

[MEETING AGENDA:]
• Agenda Title
   - Discussion points
   - Action points

[ANNOUNCEMENTS:]
[List]

[ADJOURNMENT:]
[Closing remarks]

Here is the transcription:
"{transcript}\"""",
)

SIMPLE_TEMPLATE = TemplateSpec(
    name="Template-Simple",
    db_field="simple_template",
    instructions="""Summarize and format this as a simple MoM:

Meeting Title:
Date:
Time:
Venue:
Attendees:

Key Points Discussed:
- ...

Action Items:
- ...

Closing Notes:
"{transcript}\"""",
)

DETAILED_TEMPLATE = TemplateSpec(
    name="Template-Detailed",
    db_field="detailed_template",
    instructions="""Summarize this transcript into a detailed Minutes of the Meeting with:

Meeting Information
- Name
- Date
- Time
- Venue
- Participants

Detailed Agenda:
For each item:
• Title
• Discussions
• Decisions
• Action points

Other Announcements:
Closing:
"{transcript}\"""",
)

DEFAULT_TEMPLATES: tuple[TemplateSpec, ...] = (
    FORMAL_TEMPLATE,
    SIMPLE_TEMPLATE,
    DETAILED_TEMPLATE,
)
