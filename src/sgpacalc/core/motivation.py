from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class MotivationTier:
    min_sgpa: float
    emoji: str
    title: str
    message: str
    accent: str


# Highest threshold first, mirroring GRADE_LADDER. The last row catches
# everything below 6.0 (and NaN).
MOTIVATION_TIERS: Tuple[MotivationTier, ...] = (
    MotivationTier(
        9.5,
        "🌟",
        "Outstanding!",
        "You're on the path to excellence. Keep pushing boundaries, you're among the top achievers! 🚀",
        "yellow",
    ),
    MotivationTier(
        9.0,
        "💪",
        "Great Job!",
        "You've built a strong academic foundation. Stay consistent, and you'll soon be a topper! ✨",
        "green",
    ),
    MotivationTier(
        8.5,
        "🔥",
        "Very Good!",
        "Solid performance! With just a bit more effort, you'll break into the top tier. Keep going! 📈",
        "blue",
    ),
    MotivationTier(
        8.0,
        "🧠",
        "Good Work!",
        "You're doing well. A little more focus and discipline can take you far. Stay steady and aim high! 🎯",
        "indigo",
    ),
    MotivationTier(
        7.0,
        "📘",
        "Fair Performance",
        "You've got the potential. Now it's time to sharpen your focus and aim higher. You can do it! 💡",
        "purple",
    ),
    MotivationTier(
        6.0,
        "🌱",
        "Needs Improvement",
        "Don't lose hope. This is your chance to bounce back stronger. Start fresh, aim higher! 💥",
        "orange",
    ),
    MotivationTier(
        float("-inf"),
        "❤️",
        "Don't Give Up",
        "Numbers don't define you. Learn from mistakes, rise with determination, and rewrite your story! 🔁",
        "red",
    ),
)


def select_motivation(sgpa: float) -> MotivationTier:
    for tier in MOTIVATION_TIERS:
        if sgpa >= tier.min_sgpa:
            return tier
    return MOTIVATION_TIERS[-1]
