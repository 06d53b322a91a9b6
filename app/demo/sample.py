"""Demo transcript and suggested instructions offered by the form's "Load demo" button and instruction chips."""
from typing import List

SAMPLE_TRANSCRIPT = (
    "John: Good morning everyone, thanks for joining today's quarterly review meeting. "
    "Sarah: Thanks John. I've prepared the Q3 sales report. We exceeded our targets by 15% this quarter, "
    "generating $2.3M in revenue. "
    "Mike: That's great news! The marketing campaigns we launched in July really paid off. "
    "The conversion rate increased by 22%. "
    "Sarah: Exactly. Our biggest wins were in the enterprise segment. We closed 3 major deals worth $500K each. "
    "John: Excellent work team. What about the challenges? "
    "Mike: We're seeing some supply chain delays affecting product delivery. "
    "It's adding about 2-3 weeks to our timelines. "
    "Sarah: Customer support tickets also increased by 40% due to the delivery delays. "
    "We need to address this quickly. "
    "John: Understood. Let's discuss action items. "
    "Mike, can you work with operations to resolve the supply chain issues? "
    "Mike: Absolutely. I'll have a plan by Friday. "
    "John: Sarah, please work with customer success to improve our communication about delays. "
    "Sarah: Will do. I'll draft a customer communication template by Wednesday. "
    "John: Great. Our next meeting is scheduled for next Tuesday at 2 PM. Thanks everyone!"
)

SUGGESTED_INSTRUCTIONS: List[str] = [
    "Summarize in bullet points for executives",
    "Highlight only action items and deadlines",
    "Create a brief overview for stakeholders",
    "Focus on key decisions and next steps",
    "Extract metrics and performance data",
]
