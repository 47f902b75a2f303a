from dataclasses import dataclass
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from bytestream_core.errors import MultiError


@dataclass(frozen=True)
class CheckOutcome:
    line: str
    error: MultiError | None = None

    @property
    def passed(self) -> bool:
        return self.error is None


class CheckReportRenderer:
    template_name: str = "check_report.txt.j2"

    def __init__(self):
        self.template_env = Environment(
            loader=FileSystemLoader(Path(__file__).parent / "templates"),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def render_template(self, template_name: str, **kwargs) -> str:
        template = self.template_env.get_template(template_name)
        return template.render(**kwargs)

    def render(self, outcomes: list[CheckOutcome]) -> str:
        return self.render_template(
            self.template_name,
            outcomes=outcomes,
            passed=sum(1 for outcome in outcomes if outcome.passed),
        )
