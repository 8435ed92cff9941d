# forum/constants/lang.py
# Localized UI labels, keyed by locale then label key.

DEFAULT_LOCALE = "en_US"

LABELS = {
    "en_US": {
        "updateFailLabel": "Update failed",
        "invalidUserNameLabel": "User name must be 1-20 letters, digits, '_' or '-'",
        "reservedUserNameLabel": "This user name is reserved",
        "duplicatedUserNameLabel": "This user name is already taken",
        "invalidUserURLLabel": "URL must be an http(s) address of at most 100 characters",
        "invalidUserQQLabel": "QQ must be 5-12 digits",
        "invalidUserIntroLabel": "Intro must be at most 255 characters",
        "invalidUserB3KeyLabel": "B3 key must be at most 20 characters",
        "invalidUserB3ClientURLLabel": "Client URL must be an http(s) address of at most 150 characters",
        "invalidPasswordLabel": "Password must be 1-64 characters",
        "invalidEmailLabel": "Invalid email address",
        "duplicatedEmailLabel": "This email is already registered",
        "dbErrorLabel": "Could not save changes, please try again later",
    },
    "zh_CN": {
        "updateFailLabel": "更新失败",
        "invalidUserNameLabel": "用户名只能包含 1-20 个字母、数字、'_' 或 '-'",
        "reservedUserNameLabel": "该用户名为保留名称",
        "duplicatedUserNameLabel": "用户名已被占用",
        "invalidUserURLLabel": "链接必须是不超过 100 个字符的 http(s) 地址",
        "invalidUserQQLabel": "QQ 号必须为 5-12 位数字",
        "invalidUserIntroLabel": "个人简介不能超过 255 个字符",
        "invalidUserB3KeyLabel": "B3 Key 不能超过 20 个字符",
        "invalidUserB3ClientURLLabel": "客户端地址必须是不超过 150 个字符的 http(s) 地址",
        "invalidPasswordLabel": "密码长度必须为 1-64 个字符",
        "invalidEmailLabel": "邮箱地址不合法",
        "duplicatedEmailLabel": "该邮箱已被注册",
        "dbErrorLabel": "保存失败，请稍后再试",
    },
}
