"""Narrative remarks derived from wrap statistics."""

import math

from pydantic import BaseModel, Field

from github_wrapped.models.statistics import Statistics

MINUTES_PER_COMMIT = 30


class Remark(BaseModel):
    """Headline remark for the card."""

    title: str
    message: str
    suggestion: str
    mood: str  # chill, starter, growing, hot, beast, legend


class Remarks(BaseModel):
    """Headline, quick insights and a closing fun fact."""

    main: Remark
    insights: list[str] = Field(default_factory=list)
    fun_fact: str = ""


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def main_remark(total_commits: int) -> Remark:
    """Pick the headline tier for a commit total."""
    if total_commits == 0:
        return Remark(
            title="Taking it Easy? 🌴",
            message=(
                "Looks like you're on a coding vacation! No commits yet, "
                "but hey, planning is half the battle."
            ),
            suggestion="Start small! Commit to one small project this week. Even 'Hello World' counts!",
            mood="chill",
        )
    if total_commits < 50:
        return Remark(
            title="Getting Warmed Up! 🔥",
            message=f"You've made {total_commits} commits. That's a solid start to the year!",
            suggestion="Set a goal to code 3 times a week. Consistency beats intensity!",
            mood="starter",
        )
    if total_commits < 100:
        return Remark(
            title="Momentum Building! 🚀",
            message=f"{total_commits} commits and counting! You're getting into a good rhythm.",
            suggestion=(
                "Try contributing to an open-source project. "
                "It's a great way to learn and give back!"
            ),
            mood="growing",
        )
    if total_commits < 250:
        return Remark(
            title="On Fire! 🔥",
            message=f"{total_commits} commits this year. You're absolutely crushing it!",
            suggestion="Document your journey! Start a dev blog or share your learnings.",
            mood="hot",
        )
    if total_commits < 500:
        return Remark(
            title="Coding Machine! 💪",
            message=(
                f"{total_commits} commits?! You're a productivity beast. "
                "Seriously impressive dedication."
            ),
            suggestion="Time to level up! Try learning a new tech stack or building something ambitious.",
            mood="beast",
        )
    return Remark(
        title="ABSOLUTE LEGEND! ⚡",
        message=(
            f"{total_commits} commits... Are you even human?! "
            "This is next-level commitment to the craft."
        ),
        suggestion="You're already elite. Maybe mentor others or create content to share your expertise!",
        mood="legend",
    )


def activity_insights(stats: Statistics) -> list[str]:
    """Short observations about peaks, rhythm, collaboration and reach."""
    insights = []

    peak = stats.peak_commits_in_day
    if peak > 20:
        insights.append(
            f"Your peak day had {peak} commits. That's some serious focus! "
            "Just remember to take breaks."
        )
    elif peak > 10:
        insights.append(f"Peak day: {peak} commits. You know how to get in the zone!")

    weekday = stats.most_active_day_of_week
    if weekday in ("Saturday", "Sunday"):
        insights.append(f"You code most on {weekday}s. Weekend warrior vibes! 💪")
    elif weekday == "Friday":
        insights.append("Fridays are your jam! Who needs TGIF when you're shipping code? 🎉")
    else:
        insights.append(f"{weekday}s are your power day. Keep that rhythm going!")

    prs = stats.total_prs
    if prs > 50:
        insights.append(
            f"{prs} pull requests! You're a collaboration champion. "
            "Teams love working with you."
        )
    elif prs > 20:
        insights.append(f"{prs} PRs shows you're a team player. Keep that collaborative energy!")
    elif prs < 5 and stats.total_commits > 50:
        insights.append(
            "You're coding a lot but not many PRs. Maybe try collaborating more "
            "or contributing to open source?"
        )

    languages = stats.languages
    if len(languages) >= 5:
        insights.append(
            f"{len(languages)} languages! You're a true polyglot programmer. "
            "Versatility is your superpower."
        )
    elif len(languages) == 1:
        insights.append(
            f"Focused on {languages[0].name}. Deep expertise in one language is "
            "powerful! Consider expanding your toolkit though."
        )

    if stats.total_stars > 100:
        insights.append(
            f"{stats.total_stars} stars earned! People love your work. "
            "You're making an impact! ⭐"
        )

    return insights


def fun_fact(total_commits: int) -> str:
    """Time-spent estimate at a fixed cost per commit."""
    if total_commits <= 0:
        return "Every expert was once a beginner. Your first commit is just a decision away! 🚀"
    hours = total_commits * MINUTES_PER_COMMIT / 60
    return (
        f"If each commit took {MINUTES_PER_COMMIT} minutes, you've spent "
        f"{_round_half_up(hours)} hours coding this year. That's "
        f"{_round_half_up(hours / 24)} days of pure development time! ⏰"
    )


def build_remarks(stats: Statistics) -> Remarks:
    """Derive all remarks for a statistics result."""
    return Remarks(
        main=main_remark(stats.total_commits),
        insights=activity_insights(stats),
        fun_fact=fun_fact(stats.total_commits),
    )
