from models import Stage

STAGE_CHOICES = {
    1: Stage.REGISTERED,
    2: Stage.UNDER_INVESTIGATION,
    3: Stage.HEARING_SCHEDULED,
    4: Stage.JUDGMENT_PASSED,
    5: Stage.CLOSED,
}


def parse_int(value) -> int | None:
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


def stage_from_choice(choice: int) -> Stage | None:
    return STAGE_CHOICES.get(choice)
