from src.core.logger import setup_logging

# 测试中只保留 WARNING 以上的控制台输出，不写日志文件
setup_logging("WARNING", file_logging=False)
