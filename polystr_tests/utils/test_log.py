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

import json

import pytest
import structlog

from polystr.utils.log import LoggingOutput, bind_static, setup_logging


@pytest.fixture
def reset_logging():
    yield
    setup_logging(logging_output=LoggingOutput.NULL)
    structlog.reset_defaults()


@pytest.mark.usefixtures('reset_logging')
def test_json_output(capsys: pytest.CaptureFixture[str]) -> None:
    setup_logging(logging_output=LoggingOutput.JSON, context={'node': 'test'})
    log = structlog.get_logger('polystr.test').new()
    log.info('hello {who}', who='world')
    log.debug('not shown')

    lines = [line for line in capsys.readouterr().err.splitlines() if line]
    assert len(lines) == 1
    event = json.loads(lines[0])
    assert event['event'] == 'hello world'
    assert event['who'] == 'world'
    assert event['node'] == 'test'
    assert event['level'] == 'info'


@pytest.mark.usefixtures('reset_logging')
def test_debug_output(capsys: pytest.CaptureFixture[str]) -> None:
    setup_logging(logging_output=LoggingOutput.JSON, debug=True)
    structlog.get_logger('polystr.test').debug('shown {missing}')

    lines = [line for line in capsys.readouterr().err.splitlines() if line]
    assert len(lines) == 1
    assert json.loads(lines[0])['event'] == 'shown {missing}'


@pytest.mark.usefixtures('reset_logging')
def test_null_output(capsys: pytest.CaptureFixture[str]) -> None:
    setup_logging(logging_output=LoggingOutput.NULL)
    structlog.get_logger('polystr.test').info('hidden')
    assert capsys.readouterr().err == ''


@pytest.mark.usefixtures('reset_logging')
def test_pretty_output(capsys: pytest.CaptureFixture[str]) -> None:
    setup_logging(logging_output=LoggingOutput.PRETTY)
    structlog.get_logger('polystr.test').warning('transcoded {count} units', count=3)
    err = capsys.readouterr().err
    assert 'transcoded 3 units' in err
    assert 'warning' in err


def test_static_keys_must_not_collide() -> None:
    processor = bind_static({'event': 'x'})
    with pytest.raises(AssertionError):
        processor(None, 'info', {'event': 'hello'})
    assert processor(None, 'info', {}) == {'event': 'x'}
