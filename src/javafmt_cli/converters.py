from javafmt_style.models import FormatterOptions

from .models import StyleReport


def options_to_report(options: FormatterOptions) -> StyleReport:
    """Convert an internal options object to an external Pydantic report"""
    return StyleReport(style=options.style.name.lower(), **options.as_dict())
