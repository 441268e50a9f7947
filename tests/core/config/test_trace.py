# tests/core/config/test_trace.py
"""
Testes de logging estruturado e coleta de warnings no ResolutionTrace.

Os testes asseguram que:
- eventos de log são registrados de forma estruturada
- cada evento contém `resolution_id`, `stage`, `level` e `timestamp`
- warnings são agrupados por estágio e também viram eventos
- eventos são espelhados no logger padrão

Decisões arquiteturais:
    - Logs não são strings livres, mas eventos estruturados
    - Warnings são sinais não fatais
"""

import logging

from layerconf.core.config.trace import STAGE_DEFAULT, STAGE_USER, ResolutionTrace


def test_trace_log_structured_event():
    trace = ResolutionTrace(resolution_id="r-1")

    trace.log(stage=STAGE_DEFAULT, level="info", message="hello", path="/x")

    assert len(trace.events) == 1
    event = trace.events[0]
    assert event["resolution_id"] == "r-1"
    assert event["stage"] == STAGE_DEFAULT
    assert event["level"] == "info"
    assert event["message"] == "hello"
    assert event["path"] == "/x"
    assert "timestamp" in event


def test_trace_add_warning_groups_by_stage():
    trace = ResolutionTrace()

    trace.add_warning(stage=STAGE_USER, message="w1")
    trace.add_warning(stage=STAGE_USER, message="w2")

    assert trace.warnings == {STAGE_USER: ["w1", "w2"]}
    assert [e["level"] for e in trace.events_for(STAGE_USER)] == ["warning", "warning"]


def test_trace_ids_are_unique():
    assert ResolutionTrace().resolution_id != ResolutionTrace().resolution_id


def test_trace_mirrors_to_logging(caplog):
    trace = ResolutionTrace()

    with caplog.at_level(logging.DEBUG, logger="layerconf.core.config.trace"):
        trace.log(stage=STAGE_DEFAULT, level="debug", message="parsed")
        trace.add_warning(stage=STAGE_USER, message="no user")

    records = [(r.levelno, r.getMessage()) for r in caplog.records]
    assert (logging.DEBUG, "[default] parsed") in records
    assert (logging.WARNING, "[user] no user") in records
