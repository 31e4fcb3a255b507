class BinaryTreeError(Exception):
    pass


class InvalidValueError(BinaryTreeError, ValueError):
    pass


class DuplicateValueError(BinaryTreeError, ValueError):
    pass


class NodeNotFoundError(BinaryTreeError, KeyError):
    pass
