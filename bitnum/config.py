import graphviz as gv

class Config:
    '''Configuration object contains settings

    Settings:
    - Config.graphviz: bool
        When True grapher.render will write a rendered graph of the given
        representation tree into Config.graph_directory

    - Config.graph_format: str
        Output format passed to graphviz (svg, pdf, png, ...)

    - Config.graph_directory: str
        Directory rendered graphs are written to
    '''
    def __init__(self, graphviz=False, graph_format='svg', graph_directory='.'):
        self.graphviz = graphviz
        self.graph_format = graph_format
        self.graph_directory = graph_directory

    def new_digraph(self, comment='Representation Tree'):
        return gv.Digraph(format=self.graph_format, comment=comment)

CONFIG = Config(graphviz=False)
