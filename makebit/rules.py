"""the target registry: named targets with their dependencies and command lines"""

import warnings

from makebit.errors import InvalidMakefileFormat, RedefinitionWarning
from makebit.utils import checkseq, checksingleinput, reify

warnings.filterwarnings(action='always',category=RedefinitionWarning)


class Command(object):
    """A single command line of a target's recipe. A leading '@' on the raw
    line suppresses echoing the command before it runs."""

    def __init__(self,text,suppressed=False):
        self.text = text
        self.suppressed = suppressed

    @classmethod
    def from_line(cls,raw_line):
        """parses a raw command line. Returns None for lines that are empty
        once the indentation and any '@' have been stripped."""
        line = raw_line.strip()
        suppressed = line.startswith('@')
        if suppressed:
            line = line[1:].strip()
        if not line:
            return None
        return cls(line,suppressed)

    @reify
    def argv(self):
        #naive whitespace split, quoting isn't supported
        return self.text.split()

    def __eq__(self,other):
        if not isinstance(other,Command):
            return NotImplemented
        return (self.text,self.suppressed) == (other.text,other.suppressed)

    def __hash__(self):
        return hash((self.text,self.suppressed))

    def __repr__(self):
        return '%s(%r, suppressed=%r)' %(self.__class__.__name__,self.text,self.suppressed)


class Target(object):
    """A named build unit. dependencies can contain duplicates and names that
    are never declared, those are only looked at when the target is run."""

    def __init__(self,name,dependencies=None):
        self.name = name
        self.dependencies = checkseq(dependencies)
        self.commands = []

    def __repr__(self):
        return '<%s.%s(name=%r, dependencies=%r...) at %s>' %(self.__module__,self.__class__.__name__,
                                                             self.name,self.dependencies,hex(id(self)))


class Registry(object):
    """name:target mapping filled in while a rule file is loaded.

    Redeclaring a target doesn't replace it: the new dependencies are put in
    front of the old ones and the old commands are thrown away so that only
    the commands following the last declaration are kept.
    """

    def __init__(self):
        self.targets = {}

    def declare_target(self,name,dependencies=None):
        """adds the target (or merges into an existing one) and returns it"""
        name = checksingleinput(name)
        if not name:
            raise InvalidMakefileFormat('a target must have a name')
        dependencies = checkseq(dependencies)

        target = self.targets.get(name)
        if target is None:
            target = self.targets[name] = Target(name,dependencies)
        else:
            warnings.warn('Redefining target %r, its dependencies are merged and its commands are replaced' %name,
                          RedefinitionWarning,stacklevel=2)
            target.dependencies = dependencies + target.dependencies
            target.commands = []
        return target

    def append_command(self,current_target,raw_line):
        """adds a command line to the current target. Returns the new Command
        or None if the line was blank."""
        target = self.targets.get(current_target) if current_target else None
        if target is None:
            raise InvalidMakefileFormat('command %r appears before any target' %raw_line.strip())
        command = Command.from_line(raw_line)
        if command is not None:
            target.commands.append(command)
        return command

    def get(self,name,default=None):
        return self.targets.get(name,default)

    def names(self):
        return list(self.targets)

    def adjacency(self):
        """target name -> copy of its dependency list"""
        return dict((name,list(target.dependencies)) for name,target in self.targets.items())

    def __contains__(self,name):
        return name in self.targets

    def __iter__(self):
        return iter(self.targets.values())

    def __len__(self):
        return len(self.targets)
