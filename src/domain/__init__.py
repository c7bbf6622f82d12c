# 领域层 - 平台无关的搜图业务逻辑
