"""Presentation settings passed to the grid templates."""

from dataclasses import dataclass

GRID_INPUT_TYPES = ('text', 'textarea')


@dataclass(frozen=True)
class GridConfig:
    layout: str = 'translation/layout.html'
    input_type: str = 'text'
    auto_cache_clean: bool = False
    toggle_similar: bool = False
    page_size: int = 20
    dev_tools_enabled: bool = False

    @classmethod
    def from_app_config(cls, config):
        input_type = config.get('GRID_INPUT_TYPE', 'text')
        if input_type not in GRID_INPUT_TYPES:
            raise ValueError(
                f'GRID_INPUT_TYPE must be one of: {", ".join(GRID_INPUT_TYPES)}, got {input_type!r}'
            )
        return cls(
            layout=config.get('BASE_LAYOUT', cls.layout),
            input_type=input_type,
            auto_cache_clean=bool(config.get('AUTO_CACHE_CLEAN')),
            toggle_similar=bool(config.get('GRID_TOGGLE_SIMILAR')),
            page_size=int(config.get('GRID_PAGE_SIZE', cls.page_size)),
            dev_tools_enabled=bool(config.get('DEV_TOOLS_ENABLED')),
        )
