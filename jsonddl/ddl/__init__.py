# ==============================================
# DDL: statement assembly
# ==============================================
#
# Modules:
# --------
# - ddl_generator.py → JSON document → CREATE TABLE text
#
# ==============================================

from .ddl_generator import DDLGenerator, generate_ddl

__all__ = ["DDLGenerator", "generate_ddl"]
