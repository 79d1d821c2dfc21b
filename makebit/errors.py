"""exceptions raised while loading a rule file or running a target"""


class MakeError(Exception):
    """base class of every makebit error"""


class InvalidMakefileFormat(MakeError):
    """a malformed line, or a command line with no target declared above it"""


class NoTarget(MakeError):
    """a rule line (or the command line) names no target"""


class CyclicDependency(MakeError):
    def __init__(self,cycle):
        self.cycle = list(cycle)
        super(CyclicDependency,self).__init__('there is a cyclic dependency: %s' %' -> '.join(self.cycle))


class TargetNotFound(MakeError):
    def __init__(self,target):
        self.target = target
        super(TargetNotFound,self).__init__('no rule found for target %r' %target)


class DependencyNotFound(MakeError):
    def __init__(self,target,dependency):
        self.target = target
        self.dependency = dependency
        super(DependencyNotFound,self).__init__(
            'no rule found for %r (needed to build %r)' %(dependency,target))


class CommandExecutionFailed(MakeError):
    """wraps the reason a child process couldn't be started or exited non-zero.
    output holds whatever the process printed before failing."""
    def __init__(self,command,reason,output=''):
        self.command = command
        self.reason = reason
        self.output = output
        super(CommandExecutionFailed,self).__init__("couldn't execute command %r: %s" %(command,reason))


class RedefinitionWarning(UserWarning):
    """a target was declared more than once"""
