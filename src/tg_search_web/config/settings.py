from dynaconf import Dynaconf

settings = Dynaconf(
    envvar_prefix="TGWEB",
    settings_files=["settings.toml", ".secrets.toml"],
    merge_enabled=True,
)

###
### 可以直接修改 settings.toml，也可以通过 TGWEB_ 前缀的环境变量覆盖
###

#### 请求客户端 ####
# API 基础地址，未设置时回退到当前 origin，再回退到 DEFAULT_API_BASE
API_BASE = settings.get("api_base") or None
if API_BASE is not None:
    API_BASE = str(API_BASE)

# 鉴权令牌（可选），非空时以 Bearer 方式附加
AUTH_TOKEN = str(settings.get("auth_token") or "")

DEFAULT_API_BASE = "http://localhost:5174"

# httpx 默认超时即可，这里仅允许覆盖
REQUEST_TIMEOUT_SEC = float(settings.get("request_timeout_sec", 5.0))

#### 日志 ####
# 20为INFO，25为NOTICE，30为WARNING，40为ERROR
LOGGING_LEVEL = settings.get("logging_level", 20)
LOGGING2FILE_LEVEL = settings.get("logging2file_level", 30)
# 日志文件路径，置空则只输出到控制台
LOG_FILE = str(settings.get("log_file", "log_file.log"))

#### MeiliSearch（autocomplete 接口使用）####
MEILI_HOST = str(settings.get("meili_host", "http://localhost:7700"))
MEILI_PASS = str(settings.get("meili_pass", "masterKey"))
AUTOCOMPLETE_INDEX = str(settings.get("autocomplete_index", "suggestions"))

#### Mock 后端 ####
CORS_ORIGINS = str(settings.get("cors_origins", "http://localhost:5173,http://localhost:5174")).split(",")
# 模拟网络延迟的倍率，0 表示不延迟
MOCK_LATENCY_SCALE = float(settings.get("mock_latency_scale", 1.0))
# 机器人登录码有效期与登记上限
BOT_LOGIN_CODE_TTL_SEC = float(settings.get("bot_login_code_ttl_sec", 300))
BOT_LOGIN_MAX_CODES = int(settings.get("bot_login_max_codes", 1000))

#### Toast ####
TOAST_DEFAULT_TTL_MS = int(settings.get("toast_default_ttl_ms", 3000))
