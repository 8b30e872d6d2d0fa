#  ___________________________________________________________________________
#
#  pysets: Python finite-set utilities
#  Copyright (c) 2008-2025
#  National Technology and Engineering Solutions of Sandia, LLC
#  Under the terms of Contract DE-NA0003525 with National Technology and
#  Engineering Solutions of Sandia, LLC, the U.S. Government retains certain
#  rights in this software.
#  This software is distributed under the 3-clause BSD License.
#  ___________________________________________________________________________
#
# Logging setup for the pysets package
#
import inspect
import io
import logging
import re
import sys
import textwrap

_indentation_re = re.compile(r'\s*')


def is_debug_set(logger):
    """Return True only if DEBUG output was explicitly requested for `logger`

    Unlike Logger.isEnabledFor(logging.DEBUG), a logger whose effective
    level is NOTSET does not count, and logging.disable(DEBUG) (or
    higher) turns it off.  Running with -O disables it entirely.

    """
    if not __debug__ or logger.manager.disable >= logging.DEBUG:
        return False
    return logging.NOTSET < logger.getEffectiveLevel() <= logging.DEBUG


class WrappingFormatter(logging.Formatter):
    """Formatter that line-wraps the message portion of each record

    Keyword arguments other than ``wrap`` (the line width, default 78)
    and ``hang`` (the hanging indent for continuation lines) are passed
    through to :py:class:`logging.Formatter`.  Blank lines in the
    message separate paragraphs, which are wrapped independently.

    """

    _placeholder = "<<!MSG!>>"
    _default_fmt = {
        '%': '%(levelname)s: %(message)s',
        '{': '{levelname}: {message}',
        '$': '$levelname: $message',
    }

    def __init__(self, **kwds):
        if 'fmt' not in kwds:
            style = kwds.get('style', '%')
            if style not in self._default_fmt:
                raise ValueError('unrecognized style flag "%s"' % (style,))
            kwds['fmt'] = self._default_fmt[style]
        self._wrapper = textwrap.TextWrapper(width=kwds.pop('wrap', 78))
        self._hang = kwds.pop('hang', ' ' * 4) or ''
        super().__init__(**kwds)

    def format(self, record):
        # Render the surrounding template with a placeholder, then wrap
        # the real message into it
        msg = inspect.cleandoc(record.getMessage())
        saved = record.msg, record.args
        record.msg, record.args = self._placeholder, None
        try:
            template = super().format(record)
        finally:
            record.msg, record.args = saved
        return '\n'.join(
            self._fill(line, msg) if self._placeholder in line else line
            for line in template.splitlines()
        )

    def _fill(self, line, msg):
        wrapper = self._wrapper
        indent = _indentation_re.match(line).group()
        first = indent
        rest = indent or self._hang
        paragraphs = line.strip().replace(self._placeholder, msg).split('\n\n')
        out = []
        for text in paragraphs:
            wrapper.initial_indent = first
            wrapper.subsequent_indent = rest
            out.append(wrapper.fill(' '.join(text.split())))
            first = rest
        return '\n\n'.join(out)


class _RootHandlerFilter(object):
    """Suppress package output once the application configures the root logger"""

    def filter(self, record):
        return not logging.getLogger().handlers


pysets_logger = logging.getLogger('pysets')
pysets_handler = logging.StreamHandler(sys.stdout)
pysets_handler.setFormatter(WrappingFormatter())
pysets_handler.addFilter(_RootHandlerFilter())
pysets_logger.addHandler(pysets_handler)


class LogCapture(object):
    """Collect the messages one logger emits into a text buffer

    While active, records at or above `level` sent to the named logger
    are written (message text only, one per line) to `output` (a new
    StringIO when omitted), and nothing reaches the logger's own handlers
    or its parents.  The logger's level, handlers and propagation flag
    are restored on exit.  Entering returns the buffer::

        with LogCapture('pysets.collections') as buf:
            HashSet('abc')
        assert 'Creating a HashSet' in buf.getvalue()

    """

    def __init__(self, module, level=logging.WARNING, output=None):
        self.logger = logging.getLogger(module)
        self.level = level
        self.output = io.StringIO() if output is None else output
        self._saved = None

    def __enter__(self):
        logger = self.logger
        self._saved = logger.level, logger.propagate, logger.handlers
        handler = logging.StreamHandler(self.output)
        handler.setFormatter(logging.Formatter('%(message)s'))
        logger.handlers = [handler]
        logger.propagate = False
        logger.setLevel(self.level)
        return self.output

    def __exit__(self, et, ev, tb):
        logger = self.logger
        level, logger.propagate, logger.handlers = self._saved
        logger.setLevel(level)
        self._saved = None
