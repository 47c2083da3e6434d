from __future__ import annotations

# Facade module that re-exports the balloon pop core.
# Used by the Flask app and tests; single-responsibility modules live under balloon_core/*.

try:
    from .balloon_core.board import (  # type: ignore
        Balloon, Coord, Snapshot, get, set_balloon,
        RED, BLUE, GREEN, YELLOW, NONE, INVALID, COLORS,
    )
    from .balloon_core.config import GameConfig  # type: ignore
    from .balloon_core.errors import (  # type: ignore
        BalloonError,
        InvalidDimensionsError,
        InvalidBalloonError,
    )
    from .balloon_core.rules import (  # type: ignore
        neighbors,
        cluster_at,
        is_compact,
        float_one_step,
        can_pop,
    )
    from .balloon_core.deal import (  # type: ignore
        fill_random,
        fill_from_matrix,
        deal_random,
        deal_from_matrix,
        parse_matrix,
    )
    from .balloon_core.history import History  # type: ignore
    from .balloon_core.session import BalloonGame, pop_score  # type: ignore
    from .balloon_core.render import display, display_raw  # type: ignore
except ImportError:
    from balloon_core.board import (  # type: ignore
        Balloon, Coord, Snapshot, get, set_balloon,
        RED, BLUE, GREEN, YELLOW, NONE, INVALID, COLORS,
    )
    from balloon_core.config import GameConfig  # type: ignore
    from balloon_core.errors import (  # type: ignore
        BalloonError,
        InvalidDimensionsError,
        InvalidBalloonError,
    )
    from balloon_core.rules import (  # type: ignore
        neighbors,
        cluster_at,
        is_compact,
        float_one_step,
        can_pop,
    )
    from balloon_core.deal import (  # type: ignore
        fill_random,
        fill_from_matrix,
        deal_random,
        deal_from_matrix,
        parse_matrix,
    )
    from balloon_core.history import History  # type: ignore
    from balloon_core.session import BalloonGame, pop_score  # type: ignore
    from balloon_core.render import display, display_raw  # type: ignore


def main() -> None:
    # CLI driver delegated to balloon_core.cli
    try:
        from .balloon_core.cli import main as _main  # type: ignore
    except ImportError:
        from balloon_core.cli import main as _main  # type: ignore
    raise SystemExit(_main())


if __name__ == '__main__':
    main()
