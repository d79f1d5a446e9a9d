class RoadGraphError(Exception):
    '''Erro base do construtor de grafo.'''


class MalformedInputError(RoadGraphError, ValueError):
    '''
    Atributo obrigatório ausente ou não numérico em <node>, <way> ou <nd>.
    A integridade do grafo não pode ser garantida, então a leitura é abortada.
    '''


class StructuralInvariantError(RoadGraphError):
    '''
    Aninhamento inconsistente: tag de nome sem nó aberto, ou via roteável
    encerrada sem nenhuma referência de nó.
    '''
