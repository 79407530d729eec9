"""
File: course_admin/core/security.py
Description: 密码凭证生命周期 (pwdlib: Argon2id + bcrypt)

本模块负责：
1. 密码加密 (Hash): Argon2id，固定工作因子 (见下方常量)
2. 哈希格式识别: 由各 hasher 的 identify() 按完整编码格式判断，避免重复加密
3. 密码验证 (Verify): 由哈希算法自身完成恒定时间比较，绝不比较明文
4. 异步封装: CPU 密集型操作在线程池中执行，避免阻塞事件循环

兼容性：
bcrypt 哈希 ($2a$/$2b$) 仅用于校验从旧系统导入的用户，新密码一律使用 Argon2id。
"""

from pwdlib import PasswordHash
from pwdlib.exceptions import UnknownHashError
from pwdlib.hashers.argon2 import Argon2Hasher
from pwdlib.hashers.bcrypt import BcryptHasher
from starlette.concurrency import run_in_threadpool

# ------------------------------------------------------------------------------
# 工作因子 (修改会影响所有新哈希的耗时与强度，已有哈希仍可校验)
# ------------------------------------------------------------------------------
ARGON2_TIME_COST = 3
ARGON2_MEMORY_COST = 65536  # KiB
ARGON2_PARALLELISM = 4
BCRYPT_ROUNDS = 10


# 第一个 hasher 用于生成新哈希，其余仅参与校验
password_hash = PasswordHash(
    (
        Argon2Hasher(
            time_cost=ARGON2_TIME_COST,
            memory_cost=ARGON2_MEMORY_COST,
            parallelism=ARGON2_PARALLELISM,
        ),
        BcryptHasher(rounds=BCRYPT_ROUNDS),
    )
)


def is_password_hashed(value: object) -> bool:
    """
    判断值是否已经是受支持的哈希格式。
    只看前缀不够：形如 "$2b$xxx" 的值 pwdlib 无法识别，会在登录时抛出 UnknownHashError。
    """
    if not isinstance(value, str) or not value:
        return False
    return any(hasher.identify(value) for hasher in password_hash.hashers)


def get_password_hash(password: str) -> str:
    """
    生成密码哈希值。
    已是哈希格式的值原样返回 (幂等)。
    """
    if is_password_hashed(password):
        return password
    return password_hash.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    验证明文密码与哈希值是否匹配。

    存储值不是受支持的哈希格式时直接返回 False，不做明文比较。
    """
    if not plain_password or not is_password_hashed(hashed_password):
        return False
    try:
        return password_hash.verify(plain_password, hashed_password)
    except (UnknownHashError, ValueError):
        # 格式可识别但内容损坏 (如 bcrypt 盐值非法)
        return False


async def get_password_hash_async(password: str) -> str:
    """异步生成密码哈希（线程池执行）"""
    return await run_in_threadpool(get_password_hash, password)


async def verify_password_async(plain_password: str, hashed_password: str) -> bool:
    """异步验证密码（线程池执行）"""
    return await run_in_threadpool(verify_password, plain_password, hashed_password)
