"""makebit - a small make-like build system"""

from makebit.errors import (MakeError, InvalidMakefileFormat, NoTarget, CyclicDependency, RedefinitionWarning,
                            TargetNotFound, DependencyNotFound, CommandExecutionFailed)
from makebit.rules import Command, Target, Registry
from makebit.graph import DependencyGraph
from makebit.executor import execute
from makebit.make import Make, main
