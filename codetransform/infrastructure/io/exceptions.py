class CodeTransformInfrastructureError(Exception):
    pass


class DataSourceError(CodeTransformInfrastructureError):
    pass


class DataSourceNotFoundError(DataSourceError):
    pass


class DataParseError(DataSourceError):
    pass


class DataWriteError(DataSourceError):
    pass
