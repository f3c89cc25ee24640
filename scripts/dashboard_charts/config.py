"""Load chart configuration from YAML.

A document has a `style` section and a `region_map` section:

    style:
      system_palette: Dark
      series_palette: ColorbrewerSet1
      resolution: [480, 320]
      font_scale: 1.0
    region_map:
      title: Temperature
      unit: "°C"
      precision: 1
      bounds: [15, 25]
      colormap: CoolWarm
      reversed: false
      oblique: false
      colored_tag_values: [kitchen]
      regions:
        - name: kitchen
          coordinates: [[0, 0], [0, 4], [3, 4], [3, 0]]
      values:
        kitchen: 21.5
"""

from pathlib import Path
from typing import Annotated, Optional

import yaml
from pydantic import (
    AllowInfNan,
    BaseModel,
    ConfigDict,
    Field,
    Strict,
    StrictBool,
    StrictInt,
    StrictStr,
    ValidationError,
    field_validator,
    model_validator,
)

from .colormap import Colormap
from .errors import ConfigurationError
from .palettes import ColormapType, SeriesPalette, SystemPalette
from .regions import Region

# Finite real number: YAML ints are accepted, booleans, .inf and .nan are not
Number = Annotated[float, Strict(), AllowInfNan(False)]
Pixels = Annotated[StrictInt, Field(gt=0)]
Point = tuple[Number, Number]


class StyleConfiguration(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    system_palette: SystemPalette = SystemPalette.DARK
    series_palette: SeriesPalette = SeriesPalette.COLORBREWER_SET1
    resolution: tuple[Pixels, Pixels] = (480, 320)
    font_scale: Annotated[Number, Field(gt=0)] = 1.0

    @field_validator("system_palette", mode="before")
    @classmethod
    def _system_palette(cls, value):
        return SystemPalette.from_name(value)

    @field_validator("series_palette", mode="before")
    @classmethod
    def _series_palette(cls, value):
        return SeriesPalette.from_name(value)


class RegionEntry(BaseModel):
    """A named polygon as written in the configuration file."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: StrictStr
    coordinates: tuple[Point, ...] = Field(min_length=1)

    def to_region(self):
        return Region(self.name, self.coordinates)


class RegionMapConfiguration(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    title: StrictStr
    unit: StrictStr = ""
    bounds: tuple[Number, Number]
    regions: tuple[RegionEntry, ...] = Field(min_length=1)
    precision: Annotated[StrictInt, Field(ge=0)] = 0
    # None selects the default gradient of Colormap.from_name
    colormap: Optional[ColormapType] = None
    reversed: StrictBool = False
    oblique: StrictBool = False
    colored_tag_values: tuple[StrictStr, ...] = ()
    right_margin: Annotated[StrictInt, Field(ge=0)] = 55
    values: dict[str, Optional[Number]] = Field(default_factory=dict)

    @field_validator("colormap", mode="before")
    @classmethod
    def _colormap(cls, value):
        return None if value is None else ColormapType.from_name(value)

    @field_validator("colored_tag_values", mode="before")
    @classmethod
    def _no_tags(cls, value):
        return () if value is None else value

    @field_validator("values", mode="before")
    @classmethod
    def _no_values(cls, value):
        return {} if value is None else value

    @field_validator("bounds")
    @classmethod
    def _distinct_bounds(cls, value):
        if value[0] == value[1]:
            raise ValueError(f"must be two distinct numbers, got {value!r}")
        return value

    @model_validator(mode="after")
    def _unique_region_names(self):
        seen = set()
        for region in self.regions:
            if region.name in seen:
                raise ValueError(f"duplicate region name '{region.name}'")
            seen.add(region.name)
        return self

    def build_colormap(self):
        return Colormap.from_name(self.colormap, self.bounds[0], self.bounds[1], reverse=self.reversed)

    def build_regions(self):
        return tuple(region.to_region() for region in self.regions)


def _validate(model, section, where):
    try:
        return model.model_validate(section)
    except ValidationError as e:
        problems = "; ".join(
            "{}: {}".format(".".join(str(part) for part in (where, *error["loc"])), error["msg"])
            for error in e.errors()
        )
        raise ConfigurationError(f"invalid configuration: {problems}") from e


def parse_style(data):
    """Build a StyleConfiguration from the `style` section (all optional)."""
    section = data.get("style")
    return _validate(StyleConfiguration, {} if section is None else section, "style")


def parse_region_map(data):
    """Build a RegionMapConfiguration from the `region_map` section."""
    section = data.get("region_map")
    if section is None:
        raise ConfigurationError("missing required section 'region_map'")
    return _validate(RegionMapConfiguration, section, "region_map")


def load_config(config_path):
    """Read a YAML file and return (StyleConfiguration, RegionMapConfiguration)."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"configuration file not found: {path}")
    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"cannot parse {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path} must contain a mapping at the top level")
    return parse_style(data), parse_region_map(data)
