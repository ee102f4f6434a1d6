from __future__ import annotations

from collections import Counter
from typing import Sequence

import pandas as pd

from .domain.entities import Petition, Priority, ScheduleResult
from .services.constraints import can_schedule_on_date, fits_duration
from .services.timeplan import calculate_slot_minutes


def validate_schedule(petitions: Sequence[Petition], result: ScheduleResult) -> None:
    # Partition: every petition in exactly one list
    input_ids = Counter(p.id for p in petitions)
    output_ids = Counter([h.petition.id for h in result.scheduled] + [p.id for p in result.unscheduled])
    if input_ids != output_ids:
        missing = sorted((input_ids - output_ids).keys())
        extra = sorted((output_ids - input_ids).keys())
        raise ValueError(
            f"Schedule does not partition the petitions: missing={missing}, unexpected={extra}"
        )

    # At most one petition per slot
    slot_use = Counter(h.time_slot.id for h in result.scheduled)
    reused = sorted(slot_id for slot_id, n in slot_use.items() if n > 1)
    if reused:
        raise ValueError(f"Slots assigned more than once: {reused}")

    for hearing in result.scheduled:
        petition, slot = hearing.petition, hearing.time_slot
        minutes = calculate_slot_minutes(slot.start_time, slot.end_time)
        if not fits_duration(petition, minutes):
            raise ValueError(
                f"Hearing {hearing.id}: slot lasts {minutes} min but petition needs {petition.estimated_duration} min"
            )
        if not can_schedule_on_date(petition, slot.date):
            raise ValueError(
                f"Hearing {hearing.id}: bailable petition {petition.case_number} placed on weekend {slot.date}"
            )
        if hearing.scheduled_date != slot.date:
            raise ValueError(f"Hearing {hearing.id}: scheduled date differs from slot date")


def summarize_schedule(result: ScheduleResult) -> str:
    if not result.scheduled and not result.unscheduled:
        return "No petitions."

    lines = [f"Scheduled hearings: {len(result.scheduled)}"]
    if result.scheduled:
        df = pd.DataFrame(
            [
                {
                    "date": h.scheduled_date.isoformat(),
                    "courtroom": h.time_slot.courtroom,
                    "priority": h.petition.priority.value,
                }
                for h in result.scheduled
            ]
        )
        per_day = df.groupby(["date", "courtroom"]).size().unstack(fill_value=0)
        lines.append("Hearings per day per courtroom:")
        lines.append(per_day.to_string())
    lines.append("")

    lines.append(f"Unscheduled petitions: {len(result.unscheduled)}")
    if result.unscheduled:
        order = [p.value for p in Priority]
        counts = (
            pd.Series([p.priority.value for p in result.unscheduled])
            .value_counts()
            .reindex(order, fill_value=0)
        )
        lines.append("Unscheduled by priority:")
        lines.append(counts.to_string())
    return "\n".join(lines)
