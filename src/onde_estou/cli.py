# cli.py
import argparse
import asyncio
import logging
import sys

from .config import load_config, config_to_dict
from .controller import InteractionController
from .errors import ConfigError
from .location.provider import StaticLocationProvider
from .model.store import MarkerStore
from .view.overlay import TileOverlay
from .view.projection import MapProjector
from .view.renderer import PlotRenderer

logger = logging.getLogger("onde_estou")


def parse_args(argv=None):
    p = argparse.ArgumentParser(prog="onde-estou", description="Mapa com marcadores")
    p.add_argument("--config")
    p.add_argument("--permission", choices=["granted", "denied"])
    p.add_argument("--tiles")
    p.add_argument("--zoom", type=int)
    p.add_argument("--no-overlay", dest="overlay_map", action="store_false", default=None)
    p.add_argument("--output", help="save a PNG snapshot instead of opening a window")
    p.add_argument("--print-view", action="store_true", help="print the initial view description")
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    # JSONをデフォルトに、CLIで上書き
    overrides = {k: v for k, v in vars(args).items()
                 if k in ("permission", "tiles", "zoom", "overlay_map")}
    try:
        cfg = load_config(args.config, overrides)
    except ConfigError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=getattr(logging, cfg.effective_log_level(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    logger.debug("config: %s", config_to_dict(cfg))

    # 位置取得（起動時に一度だけ）
    provider = StaticLocationProvider.from_config(cfg.permission, cfg.location)
    controller = InteractionController(MarkerStore(), region_delta=cfg.region_delta)
    view = asyncio.run(controller.mount(provider))

    loc = controller.state.location
    print(f"[OndeEstou] location: {loc.status.value}")
    if loc.located:
        print(f"[OndeEstou] {loc.coordinate.latitude:.8f},{loc.coordinate.longitude:.8f}")
    if args.print_view:
        print(view)

    if args.output:
        # スナップショットはウィンドウを開かない
        import matplotlib
        matplotlib.use("Agg")

    from .app import MapApp
    projector = MapProjector()
    overlay = TileOverlay(cfg.tiles, cfg.zoom) if cfg.overlay_map else None
    app = MapApp(controller, PlotRenderer(projector, overlay), projector)

    if args.output:
        app.save(args.output)
        print(f"[OndeEstou] saved {args.output}")
    else:
        app.show()
    print(f"[OndeEstou] DONE (markers={len(controller.store)})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
