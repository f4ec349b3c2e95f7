from bitcrc.engine.divider import compute_crc
from bitcrc.utils.bitops import format_hex
from bitcrc.variants import stage as variant_stage


if __name__ == "__main__":
    for module_name in variant_stage.available_modules():
        cfg = variant_stage.get_config(module_name)
        got = compute_crc(variant_stage.CHECK_MESSAGE, cfg=cfg)
        status = "OK" if variant_stage.self_check(module_name) else "MISMATCH"
        print(f"{module_name:<16} check={format_hex(got, cfg.width)} {status}")
