from dataclasses import dataclass

NGO_SHARE_PERCENT = 70
INSTITUTION_SHARE_PERCENT = 20
PLATFORM_SHARE_PERCENT = 10


@dataclass(frozen=True)
class RevenueSplit:
    """Shares of a sale in integer minor units of `denomination`."""

    ngo_share: int
    institution_share: int
    platform_share: int
    total: int
    denomination: str

    def as_dict(self):
        return {
            "ngo_share": str(self.ngo_share),
            "institution_share": str(self.institution_share),
            "platform_share": str(self.platform_share),
            "total": str(self.total),
            "denomination": self.denomination,
        }


def split_revenue(total, denomination) -> RevenueSplit:
    """Splits `total` 70/20/10 between NGO, institution and platform.

    The NGO and institution shares are floored; the platform share takes
    the remainder so the three always sum to `total`.
    """
    total = int(total)
    if total < 0:
        raise ValueError("`total` must be a positive number")

    ngo_share = total * NGO_SHARE_PERCENT // 100
    institution_share = total * INSTITUTION_SHARE_PERCENT // 100
    platform_share = total - ngo_share - institution_share
    return RevenueSplit(
        ngo_share=ngo_share,
        institution_share=institution_share,
        platform_share=platform_share,
        total=total,
        denomination=denomination,
    )
