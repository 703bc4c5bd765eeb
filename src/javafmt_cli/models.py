from pydantic import BaseModel


class StyleReport(BaseModel):
    style: str
    indentation_multiplier: int
    max_line_length: int
    wrap_line_comments: bool
    single_line_javadoc: bool
    indent_lambda_statement_as_block: bool
    leading_blank_block: bool
    null_annotations: bool
    max_preserve_blanks: int
