from decimal import Decimal, ROUND_HALF_UP

from app.services.report_config import STRENGTH_RULES, IMPROVEMENT_RULES


def _mean(values) -> float:
    values = list(values)
    return sum(values) / len(values)


def _round_one_decimal(value: float) -> float:
    return float(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def _apply_rules(rules, metrics: dict) -> list:
    return [
        rule["statement"]
        for rule in rules
        if rule["compare"](metrics[rule["metric"]], rule["threshold"])
    ]


def build_report(session_id: str, results) -> dict:
    """
    Aggregate the question results of one session into a report.

    ``results`` is any sequence of objects exposing ``answer_score`` and
    ``eye_contact_score``; a missing score counts as 0. The output depends
    only on the input, so calling this twice on the same results yields the
    same report.
    """
    results = list(results)
    if not results:
        raise ValueError("Cannot build a report from an empty result set")

    metrics = {
        "total_questions": len(results),
        "avg_answer_score": _mean(r.answer_score or 0 for r in results),
        "avg_eye_score": _mean(r.eye_contact_score or 0 for r in results),
    }

    return {
        "session_id": session_id,
        "total_questions": metrics["total_questions"],
        "avg_answer_score": _round_one_decimal(metrics["avg_answer_score"]),
        "avg_eye_score": _round_one_decimal(metrics["avg_eye_score"]),
        "strengths": _apply_rules(STRENGTH_RULES, metrics),
        "improvements": _apply_rules(IMPROVEMENT_RULES, metrics),
    }
