# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are
# met:
#
#     * Redistributions of source code must retain the above copyright
# notice, this list of conditions and the following disclaimer.
#     * Redistributions in binary form must reproduce the above
# copyright notice, this list of conditions and the following disclaimer
# in the documentation and/or other materials provided with the
# distribution.
#     * Neither the name of Google Inc. nor the names of its
# contributors may be used to endorse or promote products derived from
# this software without specific prior written permission.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS
# "AS IS" AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT
# LIMITED TO, THE IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR
# A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT
# OWNER OR CONTRIBUTORS BE LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL,
# SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT
# LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES; LOSS OF USE,
# DATA, OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER CAUSED AND ON ANY
# THEORY OF LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY, OR TORT
# (INCLUDING NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE
# OF THIS SOFTWARE, EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.

"""The module contains utils for writing tests."""

import asyncio
from functools import wraps
from typing import TYPE_CHECKING, cast

from picklist.conf import GlobalSettings, settings

if TYPE_CHECKING:
    from types import TracebackType
    from typing import Any

    from typing_extensions import Self

    from picklist.types import Func


class TestContextDecorator:
    """A base class for the helpers altering something for the duration of
    either a with block or a decorated test, a coroutine one included.
    """

    def __enter__(self: 'Self') -> None:
        self.enable()

    def __exit__(
        self: 'Self',
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: 'TracebackType | None',
    ) -> None:
        self.disable()

    def enable(self: 'Self') -> None:
        """Apply the alteration."""
        raise NotImplementedError

    def disable(self: 'Self') -> None:
        """Revert the alteration."""
        raise NotImplementedError

    def __call__(self: 'Self', func: 'Func') -> 'Func':
        """Wrap the test so that it runs with the alteration applied."""
        if not callable(func):
            msg = f'Cannot decorate object of type {type(func)}'
            raise TypeError(msg)

        if asyncio.iscoroutinefunction(func):
            # The alteration must outlive the creation of the coroutine.
            @wraps(func)
            async def inner(*args: 'Any', **kwargs: 'Any') -> 'Any':
                with self:
                    return await func(*args, **kwargs)
        else:
            @wraps(func)
            def inner(*args: 'Any', **kwargs: 'Any') -> 'Any':
                with self:
                    return func(*args, **kwargs)

        return cast('Func', inner)


class override_settings(TestContextDecorator):  # noqa: N801
    """Decorates tests to perform temporary alterations of the settings."""

    def __init__(self: 'Self', **kwargs: 'Any') -> None:
        self.options = kwargs
        self.wrapped: 'GlobalSettings | None' = None

    def enable(self: 'Self') -> None:
        """Swap the settings for a copy of the global ones with
        the specified values on top.
        """
        overridden_settings = GlobalSettings()
        for key, new_value in self.options.items():
            setattr(overridden_settings, key, new_value)

        self.wrapped = cast('GlobalSettings', settings._wrapped)  # noqa: SLF001
        settings._wrapped = overridden_settings  # noqa: SLF001

    def disable(self: 'Self') -> None:
        """Bring the original settings back."""
        settings._wrapped = self.wrapped  # noqa: SLF001
        self.wrapped = None
