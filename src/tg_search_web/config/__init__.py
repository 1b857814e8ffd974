"""
Config 包

配置统一由 settings 模块在导入时读取（Dynaconf，TGWEB_ 环境变量前缀）。
"""
