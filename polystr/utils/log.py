# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Optional structlog setup for applications that want to see the events polystr emits.

Library modules only call `structlog.get_logger()`, nothing here runs on import.
"""

import logging
import logging.config
from collections import OrderedDict
from enum import IntEnum, auto
from typing import Any, Mapping, Optional

import structlog
from structlog.typing import EventDict, Processor
from typing_extensions import assert_never


class LoggingOutput(IntEnum):
    NULL = auto()
    PRETTY = auto()
    JSON = auto()


def _final_renderer(output: LoggingOutput) -> Optional[Processor]:
    match output:
        case LoggingOutput.NULL:
            return None
        case LoggingOutput.PRETTY:
            return structlog.dev.ConsoleRenderer(colors=False)
        case LoggingOutput.JSON:
            return structlog.processors.JSONRenderer()
        case _:
            assert_never(output)


def interpolate_event(_logger: Any, _method: str, event_dict: EventDict) -> EventDict:
    """Fill `{name}` placeholders of the event string from its own keys, keeping it as is when one is missing."""
    event = event_dict.get('event')
    if isinstance(event, str):
        try:
            event_dict['event'] = event.format(**event_dict)
        except (KeyError, IndexError):
            pass
    return event_dict


def bind_static(context: Mapping[str, str]) -> Processor:
    """A processor adding the same keys to every event, which must not shadow keys of the event itself."""
    def processor(_logger: Any, _method: str, event_dict: EventDict) -> EventDict:
        for key, value in context.items():
            assert key not in event_dict, f'static log key {key!r} collides with an event key'
            event_dict[key] = value
        return event_dict
    return processor


def setup_logging(
    *,
    logging_output: LoggingOutput = LoggingOutput.PRETTY,
    debug: bool = False,
    context: Optional[Mapping[str, str]] = None,
) -> None:
    level = 'DEBUG' if debug else 'INFO'
    timestamper = structlog.processors.TimeStamper(fmt='%Y-%m-%d %H:%M:%S')
    renderer = _final_renderer(logging_output)

    if renderer is None:
        handler: dict[str, Any] = {'class': 'logging.NullHandler'}
    else:
        handler = {'class': 'logging.StreamHandler', 'level': 'DEBUG', 'formatter': 'structured'}

    logging.config.dictConfig({
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'structured': {
                '()': structlog.stdlib.ProcessorFormatter,
                'processor': renderer or structlog.dev.ConsoleRenderer(colors=False),
                'foreign_pre_chain': [structlog.stdlib.add_log_level, structlog.stdlib.add_logger_name, timestamper],
            },
        },
        'handlers': {'polystr': handler},
        'loggers': {
            'polystr': {'handlers': ['polystr'], 'level': level, 'propagate': False},
            '': {'handlers': ['polystr'], 'level': level},
        },
    })

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            bind_static(context or {}),
            structlog.stdlib.PositionalArgumentsFormatter(),
            interpolate_event,
            timestamper,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=OrderedDict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
