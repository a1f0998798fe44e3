class CaseStoreError(Exception):
    pass


class IdCollision(CaseStoreError):
    def __init__(self, case_id: int):
        self.case_id = case_id
        super().__init__(f"Case {case_id} already exists")


class NotFound(CaseStoreError):
    def __init__(self, case_id: int):
        self.case_id = case_id
        super().__init__(f"Case {case_id} not found")


class RecordsFormatError(ValueError):
    def __init__(self, line_no: int, message: str):
        self.line_no = line_no
        super().__init__(f"line {line_no}: {message}")
