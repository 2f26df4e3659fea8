# app/features/story/prompt.py
from typing import Optional, Sequence

def build_story_prompt(keywords: Sequence[str], *, name: Optional[str] = None, age: Optional[int] = None) -> str:
    lines = [f"Write a short story using the following keywords: {', '.join(keywords)}."]
    if name:
        lines.append(f"The main character's name is {name}.")
    if age is not None:
        lines.append(f"The main character is {age} years old.")
    lines += [
        "The story should be between 150-200 words.",
        "Make it engaging and suitable for young readers.",
        "The story should have a clear beginning, middle, and end.",
    ]
    return "\n".join(lines)
