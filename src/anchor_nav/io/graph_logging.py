# io/graph_logging.py
import json
import logging
import sys
import uuid

from anchor_nav.config.models import LogModel
from anchor_nav.domain.hooks import NoopHooks


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        return json.dumps(payload, default=str)


def _default_json_logger(name="anchor_nav", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class GraphLogging(NoopHooks):
    """
    One place to shape and emit structured logs for graph edits and queries.
    Edits are DEBUG and only emitted with ``debug=True``; searches and trails are INFO.
    """

    def __init__(
        self,
        graph_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        logger: logging.Logger | None = None,
    ):
        self.graph_id, self.debug = graph_id, debug
        self.log = logger or _default_json_logger(level=level)

    @classmethod
    def from_config(cls, cfg: LogModel, graph_id: str = "local") -> "GraphLogging":
        return cls(graph_id=graph_id, level=cfg.level, debug=cfg.debug)

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        payload = {"graph_id": self.graph_id}
        for k, v in extra.items():
            payload[k] = str(v) if isinstance(v, uuid.UUID) else v
        self.log.log(getattr(logging, level), msg, extra={"extra": payload})

    # --------------------------------------------------------

    # edits

    def edge_added(self, *, source, destination):
        if self.debug:
            self._emit("DEBUG", "edge_added", source=source, destination=destination)

    def edge_removed(self, *, source, destination):
        if self.debug:
            self._emit("DEBUG", "edge_removed", source=source, destination=destination)

    def vertex_evicted(self, *, identifier):
        if self.debug:
            self._emit("DEBUG", "vertex_evicted", identifier=identifier)

    def vertex_updated(self, *, identifier):
        if self.debug:
            self._emit("DEBUG", "vertex_updated", identifier=identifier)

    # queries

    def search_start(self, *, finder, source, destination):
        if self.debug:
            self._emit("DEBUG", "search_start", finder=finder, source=source, destination=destination)

    def search_end(self, *, finder, found, hops, length_m, expanded, ms):
        self._emit(
            "INFO",
            "search_end",
            finder=finder,
            found=found,
            hops=hops,
            length_m=round(length_m, 6),
            expanded=expanded,
            ms=round(ms, 3),
        )

    def trail_built(self, *, poses, step_m, ms):
        self._emit("INFO", "trail_built", poses=poses, step_m=step_m, ms=round(ms, 3))

    def error(self, *, reason: str, **extra):
        self._emit("ERROR", "graph_error", reason=reason, **extra)
