"""
Jobly 核心模块：配置、数据库、异常与 SQL 片段构建
"""
