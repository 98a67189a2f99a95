from decimal import Decimal

D = Decimal

CPP_BASIC_EXEMPTION = D("3500")
CPP_MAX_PENSIONABLE_EARNINGS = D("61600")
CPP_RATE = D("0.0545")
CPP_MAX_EMPLOYEE = D("3166.45")

EI_MIE = D("56300")
EI_RATE_EMP = D("0.0158")
EI_MAX_EMPLOYEE = (EI_MIE * EI_RATE_EMP).quantize(D("0.01"))
