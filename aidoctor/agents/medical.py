"""
loads the system prompt shared by every provider adapter (medical_system.txt)
"""
from pathlib import Path

def load_system_prompt() -> str:
    p = Path(__file__).resolve().parents[1] / "prompts" / "medical_system.txt"
    return p.read_text(encoding="utf-8").strip()
