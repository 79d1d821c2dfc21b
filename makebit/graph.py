"""read-only dependency graph over the registry's targets.

The graph itself only holds the adjacency lists. Every query builds its own
throwaway traversal object so that visited/exploring marks never survive from
one call to the next.
"""

from ordered_set import OrderedSet

UNVISITED, EXPLORING, DONE = 0, 1, 2


class _CycleSearch(object):
    """three colour depth first search. The path stack is left as it is when a
    back edge is found so it can be reported. An explicit stack of
    (node, remaining dependencies) is used so long chains don't hit the
    recursion limit."""

    def __init__(self,adjacency):
        self.adjacency = adjacency
        self.state = {}
        self.path = []

    def enter(self,node,stack):
        self.state[node] = EXPLORING
        self.path.append(node)
        stack.append((node,iter(self.adjacency.get(node,()))))

    def visit(self,root):
        stack = []
        self.enter(root,stack)
        while stack:
            node,deps = stack[-1]
            for dep in deps:
                state = self.state.get(dep,UNVISITED)
                if state == EXPLORING:
                    return True
                elif state == UNVISITED:
                    self.enter(dep,stack)
                    break
                #DONE nodes were already proven acyclic
            else:
                stack.pop()
                self.path.pop()
                self.state[node] = DONE
        return False

    def run(self):
        for node in self.adjacency:
            if self.state.get(node,UNVISITED) != UNVISITED:
                continue
            if self.visit(node):
                return list(self.path)
        return []


class _BuildOrder(object):
    """post-order depth first search from a single target"""

    def __init__(self,adjacency):
        self.adjacency = adjacency
        self.visited = set()
        self.order = OrderedSet()

    def enter(self,node,stack):
        self.visited.add(node)
        stack.append((node,iter(self.adjacency.get(node,()))))

    def run(self,target):
        stack = []
        self.enter(target,stack)
        while stack:
            node,deps = stack[-1]
            for dep in deps:
                if dep not in self.visited:
                    self.enter(dep,stack)
                    break
            else:
                stack.pop()
                self.order.add(node)
        return self.order


class DependencyGraph(object):
    """target name -> dependency names, as declared (duplicates included)."""

    def __init__(self,adjacency):
        self.adjacency = dict((name,list(deps)) for name,deps in adjacency.items())

    @classmethod
    def from_registry(cls,registry):
        return cls(registry.adjacency())

    def find_cycle(self):
        """returns [] if the graph is acyclic. Otherwise returns the path
        of the search when it first ran into a node still being explored.
        The cycle is a suffix of that path, the path may start with some
        nodes leading into the cycle."""
        return _CycleSearch(self.adjacency).run()

    def build_order(self,target):
        """every target the given one depends on (directly or not), each one
        listed once and after all of its own dependencies, ending with target
        itself. Dependencies with no rule are included as they are. The graph
        must be acyclic."""
        return _BuildOrder(self.adjacency).run(target)

    def dependencies(self,name):
        return list(self.adjacency.get(name,()))

    def as_dict(self):
        return dict((name,list(deps)) for name,deps in self.adjacency.items())

    def __contains__(self,name):
        return name in self.adjacency

    def __iter__(self):
        return iter(self.adjacency)

    def __len__(self):
        return len(self.adjacency)
