''' Put all exceptions here. '''

class InvalidArgumentError(ValueError):
    '''
    Raised when an identifier or property name is not a non-empty string.

    This is always a programming error and is raised before any state is
    modified.
    '''
    def __init__(self, arg_name, value, msg=None):
        self.arg_name = arg_name
        self.value = value
        self.msg = msg.format(arg_name) if msg else None


    def __str__(self):
        return self.msg or (
            '`{}` should be a string and cannot be None or empty '
            '(got {!r}).'.format(self.arg_name, self.value))



class UnknownMethodError(AttributeError):
    '''
    Raised when a dynamic accessor name does not match the
    ``get<Ns>_<Name>`` or ``all<Ns>_<Name>`` patterns.

    This subclasses :class:`AttributeError` so that ``hasattr()`` and the
    copy and pickle protocols see a missing attribute.
    '''
    def __init__(self, cls_name, name):
        super().__init__(name)
        self.cls_name = cls_name
        self.name = name


    def __str__(self):
        return 'Tried to call unknown method {}::{}'.format(
                self.cls_name, self.name)



class ConfigError(RuntimeError):
    '''
    Raised when a configuration file does not have the expected structure.
    '''
    def __init__(self, fname, msg=None):
        self.fname = fname
        self.msg = msg

    def __str__(self):
        return 'Invalid configuration in {}: {}'.format(
                self.fname, self.msg or 'unknown error')
