"""
Template tags for reports app.
"""
from django import template

register = template.Library()


@register.filter
def trend_icon(trend):
    """Bootstrap icon name for a growth percentage."""
    if trend is None:
        return ''
    if trend > 0:
        return 'arrow-up'
    if trend < 0:
        return 'arrow-down'
    return 'dash'


@register.filter
def trend_class(trend):
    """Return CSS class for a growth percentage."""
    if trend is None or trend == 0:
        return 'text-muted'
    return 'text-success' if trend > 0 else 'text-danger'


@register.filter(name='abs')
def absolute(value):
    try:
        return abs(value)
    except TypeError:
        return value


@register.inclusion_tag('reports/partials/stat_table.html')
def stat_table(rows):
    """Render (category, entry) rows as the Category/Count/Percentage/Trend table."""
    return {'rows': rows}
