# src/layerconf/core/config/trace.py
"""
ResolutionTrace — rastro estruturado de uma resolução de configuração.

Este módulo define o **ResolutionTrace**, a estrutura que acompanha uma
única chamada de resolução e registra, estágio a estágio, o que foi
adquirido, mesclado e decodificado.

Princípios fundamentais:
- Isolamento por resolução (cada chamada possui seu próprio trace)
- Logs são eventos estruturados, não strings livres
- Todo evento é espelhado no logger padrão do módulo `logging`

Estágios canônicos: `default`, `user`, `cmdline`, `decode`.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List


logger = logging.getLogger(__name__)

STAGE_DEFAULT = "default"
STAGE_USER = "user"
STAGE_CMDLINE = "cmdline"
STAGE_DECODE = "decode"

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class ResolutionTrace:
    """
    Rastro de uma resolução de configuração.

    Campos canônicos:
    - resolution_id: identificador único da resolução
    - created_at: timestamp UTC de criação
    - events: log estruturado de eventos
    - warnings: warnings por estágio
    """

    resolution_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    created_at: str = field(default_factory=_now)

    events: List[Dict[str, Any]] = field(default_factory=list)
    warnings: Dict[str, List[str]] = field(default_factory=dict)

    # -----------------------------
    # Logging & warnings
    # -----------------------------
    def log(self, *, stage: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "resolution_id": self.resolution_id,
            "stage": stage,
            "level": level,
            "message": message,
            "timestamp": _now(),
        }
        event.update(extra)
        self.events.append(event)

        logger.log(_LEVELS.get(level, logging.INFO), "[%s] %s", stage, message)

    def add_warning(self, *, stage: str, message: str) -> None:
        if stage not in self.warnings:
            self.warnings[stage] = []
        self.warnings[stage].append(message)
        self.log(stage=stage, level="warning", message=message)

    def events_for(self, stage: str) -> List[Dict[str, Any]]:
        return [e for e in self.events if e["stage"] == stage]
