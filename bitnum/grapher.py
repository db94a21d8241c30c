import os
import logging

from . import config
from .unsigned import Zero, Pos, One, Bit0, Bit1
from .signed import Constant, NonConstant, Edge, Cons
from .error_types import MalformedValueError

log = logging.getLogger('grapher')

__all__ = [
    'label',
    'to_digraph',
    'render',
]

def label(node):
    '''Node label for a single representation node
    '''
    if isinstance(node, (Zero, Pos, One, Bit0, Bit1, NonConstant)):
        return type(node).__name__
    elif isinstance(node, (Constant, Edge, Cons)):
        b = node.sign if isinstance(node, Constant) else node.lsb
        return '{}({})'.format(type(node).__name__, b)

    raise MalformedValueError('Unsigned or Signed', node)

def _children(node):
    for field in ('bits', 'rest'):
        child = getattr(node, field, None)
        if child is not None:
            yield child

def to_digraph(value, digraph=None):
    '''Draw the tree of `value' onto `digraph' (or a fresh Digraph)
    one node per representation node, with an edge to each node's rest
    '''
    if digraph is None:
        digraph = config.CONFIG.new_digraph()

    count = 0
    stack = [(None, value)]
    while stack:
        parent, node = stack.pop()
        node_id = str(count)
        count += 1

        digraph.node(node_id, label=label(node))
        if parent is not None:
            digraph.edge(parent, node_id)

        for child in _children(node):
            stack.append((node_id, child))

    return digraph

def render(value, filename=None):
    if not config.CONFIG.graphviz:
        log.debug('graphviz disabled, not rendering {!r}'.format(value))
        return None

    filename = filename or '{}.gv'.format(type(value).__name__.lower())
    path = os.path.join(config.CONFIG.graph_directory, filename)
    log.debug('rendering {} to {}'.format(value, path))
    return to_digraph(value).render(path)
