"""runs a single recipe command as a child process"""

import subprocess
import sys

from makebit.errors import CommandExecutionFailed


def execute(command,out=None):
    """echoes the command (unless suppressed), runs it to completion and prints
    its combined stdout/stderr. Raises CommandExecutionFailed if the process
    can't be started or exits with a non-zero status.

    No shell is involved: the command text is split on whitespace and the
    first word is the executable.
    """
    out = sys.stdout if out is None else out
    if not command.suppressed:
        print(command.text,file=out)
        out.flush()

    try:
        result = subprocess.run(command.argv,stdout=subprocess.PIPE,stderr=subprocess.STDOUT)
    except (OSError,ValueError) as e:
        raise CommandExecutionFailed(command.text,str(e))

    output = result.stdout.decode('utf-8','replace')
    if result.returncode != 0:
        raise CommandExecutionFailed(command.text,'exit status %d' %result.returncode,output)
    out.write(output)
    out.flush()
