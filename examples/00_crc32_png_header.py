from bitcrc.engine.config import CrcConfig
from bitcrc.engine.divider import compute_crc
from bitcrc.utils.bitops import format_bits, format_hex, message_bits


if __name__ == "__main__":
    # IHDR chunk of a 908x720 RGBA PNG. Expected CRC: 0xDBF1FE9A
    msg = bytes([
        0x49, 0x48, 0x44, 0x52, 0x00, 0x00, 0x03, 0x8C, 0x00,
        0x00, 0x02, 0xD0, 0x08, 0x06, 0x00, 0x00, 0x00,
    ])

    cfg = CrcConfig(
        width=32,
        polynomial=0x04C11DB7,
        initial_remainder=0xFFFFFFFF,
        final_xor=0xFFFFFFFF,
        reflect_input=True,
        reflect_output=True,
    )
    crc = compute_crc(msg, cfg=cfg)

    print(f"msg: {message_bits(msg)}")
    print()
    print("------- Results -------")
    print(f"CRC bits: {format_bits(crc, cfg.width)}")
    print(f"CRC hex: {format_hex(crc, cfg.width)}")
