# Copyright (c) 2014 The Chromium Embedded Framework Authors. All rights
# reserved. Use of this source code is governed by a BSD-style license that
# can be found in the LICENSE file

from __future__ import absolute_import
from subprocess import Popen, PIPE, STDOUT
import sys

# Exit status used by shells when a command cannot be found.
COMMAND_NOT_FOUND = 127


def exec_cmd(cmd, path=None, merge_stderr=False):
  """ Execute the specified command (a list of arguments) and return the
      result. When |merge_stderr| is True the error output is folded into
      'out' and 'err' is always empty. """
  process = Popen(
      cmd,
      cwd=path,
      stdout=PIPE,
      stderr=STDOUT if merge_stderr else PIPE,
      shell=(sys.platform == 'win32'))
  # Reads until end of stream, so long responses are never truncated.
  out, err = process.communicate()
  return {
      'out': out.decode('utf-8', 'replace'),
      'err': '' if err is None else err.decode('utf-8', 'replace'),
      'ret': process.returncode
  }


def exec_vcs_query(cmd, config):
  """ Execute a version control query with error output merged into the
      response. Returns a (success, response) tuple where success is True only
      if the command ran and exited with status 0. Failing to start the
      command is reported as a failure and never raised. """
  cmd_string = ' '.join(cmd)
  if config.debug:
    sys.stdout.write('\nSending query: "%s"\n' % cmd_string)

  try:
    result = exec_cmd(cmd, merge_stderr=True)
  except OSError as e:
    if config.debug:
      sys.stdout.write('-> Cannot start process: %s\n' % e)
    result = {'out': '', 'err': '', 'ret': COMMAND_NOT_FOUND}

  if config.debug:
    sys.stdout.write('Got response:\n[%s]\nExit status: %d\n' %
                     (result['out'], result['ret']))

  if result['ret'] != 0:
    # Hint that the command itself is probably missing.
    if config.verbose and result['ret'] == COMMAND_NOT_FOUND:
      sys.stdout.write('%s is probably not installed.\n' % cmd[0])
    return (False, result['out'])
  return (True, result['out'])


def probe_tool(tool, config):
  """ Returns True if |tool| can be invoked on this system. """
  if config.verbose:
    sys.stdout.write('Checking if %s exists... ' % tool)

  (found, _) = exec_vcs_query([tool, '--version'], config)

  if config.verbose:
    sys.stdout.write('Found\n' if found else 'Not found\n')
  return found
