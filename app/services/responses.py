# app/services/responses.py
# 매직 8볼 고정 응답 테이블 (20개, 순서 고정 / 런타임 변경 없음)
import random
from typing import Optional

RESPONSES: tuple[str, ...] = (
    "It is certain",
    "Reply hazy, try again",
    "Don't count on it",
    "It is decidedly so",
    "Ask again later",
    "My reply is no",
    "Without a doubt",
    "Better not tell you now",
    "My sources say no",
    "Yes definitely",
    "Cannot predict now",
    "Outlook not so good",
    "You may rely on it",
    "Concentrate and ask again",
    "Very doubtful",
    "As I see it, yes",
    "Most likely",
    "Outlook good",
    "Yes",
    "Signs point to yes",
)


def pick_random(rng: Optional[random.Random] = None) -> str:
    """응답 테이블에서 균등 확률로 하나를 뽑는다. 테스트에서는 rng를 주입."""
    return (rng or random).choice(RESPONSES)
