from dataclasses import dataclass


@dataclass(frozen=True)
class RenderSettings:
    """
    Formatting knobs shared by the display renderer and the CSV collaborator.
    """
    null_text: str = "null"
    header_gap: int = 4      # spaces after each "[name]" header cell
    cell_gap: int = 6        # base spaces after each value cell
    delimiter: str = ","
    encoding: str = "utf-8"


DEFAULT_SETTINGS = RenderSettings()
