from django import template
from apps.goals.domain.services import to_local_date

register = template.Library()


@register.filter
def local_date(value):
    """Ta sama normalizacja terminu co w filtrze "na dziś"."""
    return to_local_date(value)


@register.filter
def hours(minutes, digits=1):
    """Minuty -> godziny, np. 90 -> '1.5'."""
    try:
        return f"{(float(minutes or 0) / 60):.{int(digits)}f}"
    except (TypeError, ValueError):
        return ""
